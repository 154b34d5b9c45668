"""Printers: the output side of a template.

A Printer accepts one value at a time and writes its textual form to a
destination. Printers never buffer or reorder; each ``print`` call is one
write against the underlying sink.
"""

import codecs
import locale
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, TextIO


class UnconfiguredSinkError(Exception):
    """Raised when a template prints before any destination is attached."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or "No Printer defined on the Template"
        super().__init__(self.message)


class Printer(ABC):
    """Abstract sink for template output.

    Implementations own their destination for the duration of one render
    and must write synchronously, in call order.
    """

    @abstractmethod
    def print(self, value: Any) -> None:
        """Write the textual form of ``value`` to the destination.

        Args:
            value: Any value; converted with ``str()``
        """
        pass


class NullPrinter(Printer):
    """Placeholder printer that fails every call.

    Templates start with a NullPrinter so that rendering without a
    destination raises instead of silently discarding output.
    """

    def print(self, value: Any) -> None:
        raise UnconfiguredSinkError()


class WriterPrinter(Printer):
    """Printer over a text sink (anything with ``write(str)``).

    Attributes:
        writer: The character sink written to
    """

    def __init__(self, writer: TextIO) -> None:
        """Initialize the printer.

        Args:
            writer: Text sink such as a StringIO or a file opened in text mode
        """
        self.writer = writer

    def print(self, value: Any) -> None:
        self.writer.write(str(value))


class StreamPrinter(Printer):
    """Printer over a binary stream.

    One incremental encoder serves the whole render, so stateful codecs
    (utf-16, utf-8-sig) emit their byte-order mark once, as a text file
    would. Each value is still written immediately, in call order.

    Attributes:
        stream: The byte sink written to
        encoding: Text encoding (platform default when not given)
    """

    def __init__(self, stream: BinaryIO, encoding: str | None = None) -> None:
        """Initialize the printer.

        Args:
            stream: Binary sink with ``write(bytes)``
            encoding: Encoding name, or None for the locale's preferred encoding
        """
        self.stream = stream
        self.encoding = encoding or locale.getpreferredencoding(False)
        self._encoder = codecs.getincrementalencoder(self.encoding)()

    def print(self, value: Any) -> None:
        self.stream.write(self._encoder.encode(str(value)))
