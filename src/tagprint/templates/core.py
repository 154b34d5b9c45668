"""Template core: composition operations and render entry points.

A TextTemplate subclass implements ``render()`` as an ordered sequence of
composition calls (``tag``, ``text``, ``println``...). The render entry points
bind a Printer for the chosen destination and run ``render()``; every call
writes straight through to the destination.

Usage:
    class Page(TextTemplate):
        def render(self) -> None:
            self.h2("Title")
            self.ul(lambda t: (t.li("One"), t.li("Two")))

    html = Page(newline="\\n").render_to_text()
"""

import io
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Any, BinaryIO, Callable, TextIO

from tagprint.config import TagprintConfig
from tagprint.printers import NullPrinter, Printer, StreamPrinter, WriterPrinter
from tagprint.templates import tags
from tagprint.utils.logging import structured

logger = logging.getLogger(__name__)

# A nested content block receives the template it renders into
Block = Callable[["TextTemplate"], None]
Content = str | Block

_MISSING = object()


class Template(ABC):
    """Generic template: something that renders itself to its output."""

    @abstractmethod
    def render(self) -> None:
        """Render the template to its current output."""
        pass


class TextTemplate(Template, Printer):
    """Base class for templates producing text through a Printer.

    The printer starts as a NullPrinter, so composition calls fail with
    UnconfiguredSinkError until a render entry point (or the caller) binds a
    real one. Each render entry point rebinds ``printer``; an instance must
    not be rendered from two threads at once.

    Attributes:
        printer: Current output sink
        newline: Line separator emitted by println()
        encoding: Encoding for stream and file destinations (None = platform default)
    """

    def __init__(
        self,
        config: TagprintConfig | None = None,
        *,
        newline: str | None = None,
        encoding: str | None = None,
        printer: Printer | None = None,
    ) -> None:
        """Initialize the template.

        Args:
            config: Configuration providing output defaults
            newline: Line separator, overriding config.output.newline
            encoding: Destination encoding, overriding config.output.encoding
            printer: Initial printer (default: NullPrinter)
        """
        config = config or TagprintConfig()
        self.printer: Printer = printer or NullPrinter()
        self.newline = newline if newline is not None else config.output.separator
        self.encoding = encoding if encoding is not None else config.output.encoding

    # =========================================================================
    # Composition primitives
    # =========================================================================

    def print(self, value: Any) -> None:
        self.printer.print(value)

    def __lshift__(self, value: Any) -> "TextTemplate":
        """Print ``value`` and return the template, so writes chain.

        Usage:
            self << "<TD>" << cell << "</TD>"
        """
        self.print(value)
        return self

    def println(self, value: Any = _MISSING) -> None:
        """Print ``value`` (when given) followed by the line separator."""
        if value is not _MISSING:
            self.print(value)
        self.print(self.newline)

    def text(self, content: Any) -> None:
        """Emit a line of text. The content is not escaped."""
        self.println(content)

    def tag(self, name: str, content: Content | None = None) -> None:
        """Emit a tag, optionally wrapping content.

        With no content only ``<name>`` is emitted. A string is written as a
        text line; a callable block is called with this template. If the
        block raises, the closing marker is not written.

        Args:
            name: Tag name, used verbatim in the markers
            content: Text, a block taking the template, or None
        """
        self.println(f"<{name}>")
        if content is None:
            return
        if callable(content):
            content(self)
        else:
            self.text(content)
        self.println(f"</{name}>")

    @contextmanager
    def scope(self, name: str) -> Iterator["TextTemplate"]:
        """Context-manager form of tag() for ``with`` blocks.

        Usage:
            with self.scope("UL"):
                self.li("One")
        """
        self.println(f"<{name}>")
        yield self
        self.println(f"</{name}>")

    # =========================================================================
    # Shorthands (see tagprint.templates.tags)
    # =========================================================================

    def h2(self, content: Content) -> None:
        tags.h2(self, content)

    def h3(self, content: Content) -> None:
        tags.h3(self, content)

    def ul(self, content: Content) -> None:
        tags.ul(self, content)

    def li(self, content: Content) -> None:
        tags.li(self, content)

    def b(self, content: Content) -> None:
        tags.b(self, content)

    def code(self, content: Content) -> None:
        tags.code(self, content)

    def noscript(self, content: Block) -> None:
        tags.noscript(self, content)

    def hr(self) -> None:
        tags.hr(self)

    def p(self) -> None:
        tags.p(self)

    def br(self) -> None:
        tags.br(self)

    def a(self, href: str, content: Content, title: str | None = None) -> None:
        tags.a(self, href, content, title=title)

    def font(self, size: str, content: Content) -> None:
        tags.font(self, size, content)

    def comment(self, text: str) -> None:
        tags.comment(self, text)

    def nbsp(self, count: int = 1) -> None:
        tags.nbsp(self, count)

    # =========================================================================
    # Render entry points
    # =========================================================================

    def render_to_text(self) -> str:
        """Render into memory and return the text.

        Returns:
            Exactly what render_to_file() would write for this template
        """
        buffer = io.StringIO(newline="")
        try:
            self.render_to_writer(buffer)
        finally:
            self.printer = NullPrinter()
        return buffer.getvalue()

    def render_to(self, destination: str | os.PathLike | BinaryIO | TextIO) -> None:
        """Render to a file path, a binary stream or a text sink.

        Args:
            destination: str/PathLike (file), binary stream, or object with write(str)
        """
        if isinstance(destination, (str, os.PathLike)):
            self.render_to_file(destination)
        elif isinstance(destination, (io.RawIOBase, io.BufferedIOBase)):
            self.render_to_stream(destination)
        else:
            self.render_to_writer(destination)

    def render_to_writer(self, writer: TextIO) -> None:
        """Render to a caller-owned text sink. The sink is left open.

        Args:
            writer: Object with write(str)
        """
        self._render(WriterPrinter(writer), "writer")

    def render_to_stream(self, stream: BinaryIO) -> None:
        """Render to a binary stream, then close it.

        The stream is closed exactly once whether or not rendering succeeds.

        Args:
            stream: Binary sink; encoded with ``self.encoding``
        """
        with closing(stream):
            try:
                self._render(StreamPrinter(stream, self.encoding), "stream")
            finally:
                self.printer = NullPrinter()

    def render_to_file(self, path: str | os.PathLike) -> None:
        """Render to a file, replacing its contents.

        The file is opened without newline translation so the output matches
        render_to_text() exactly, and is closed on every exit path.

        Args:
            path: Destination file path
        """
        path = Path(path)
        with open(path, "w", encoding=self.encoding, newline="") as f:
            try:
                self._render(WriterPrinter(f), f"file {path}")
            finally:
                self.printer = NullPrinter()

    def _render(self, printer: Printer, destination: str) -> None:
        """Bind ``printer`` and run render(), logging the outcome."""
        name = type(self).__name__
        self.printer = printer
        structured(
            logger,
            logging.DEBUG,
            f"Rendering {name} to {destination}",
            template=name,
            destination=destination,
        )
        try:
            self.render()
        except Exception as e:
            logger.error("Rendering %s to %s failed: %s", name, destination, e)
            raise
        logger.debug("Rendered %s to %s", name, destination)
