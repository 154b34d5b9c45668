"""Unit tests for printers."""

import codecs
import io
import locale

import pytest

from tagprint.printers import (
    NullPrinter,
    Printer,
    StreamPrinter,
    UnconfiguredSinkError,
    WriterPrinter,
)


class TestNullPrinter:
    """Tests for NullPrinter."""

    def test_print_raises(self) -> None:
        """Test that every print fails loudly."""
        with pytest.raises(UnconfiguredSinkError, match="No Printer defined"):
            NullPrinter().print("anything")

    def test_is_printer(self) -> None:
        """Test that NullPrinter satisfies the Printer interface."""
        assert isinstance(NullPrinter(), Printer)


class TestWriterPrinter:
    """Tests for WriterPrinter."""

    def test_writes_text(self) -> None:
        """Test that strings are written as given."""
        buffer = io.StringIO()
        printer = WriterPrinter(buffer)

        printer.print("<P>")
        printer.print("hello")

        assert buffer.getvalue() == "<P>hello"

    def test_converts_values_with_str(self) -> None:
        """Test that non-string values are converted with str()."""
        buffer = io.StringIO()
        printer = WriterPrinter(buffer)

        printer.print(42)
        printer.print(None)
        printer.print(1.5)

        assert buffer.getvalue() == "42None1.5"


class TestStreamPrinter:
    """Tests for StreamPrinter."""

    def test_encodes_each_value(self) -> None:
        """Test that values are encoded with the configured encoding."""
        stream = io.BytesIO()
        printer = StreamPrinter(stream, encoding="utf-8")

        printer.print("café")

        assert stream.getvalue() == "café".encode()

    def test_default_encoding_is_platform_preferred(self) -> None:
        """Test that no encoding falls back to the locale's preferred encoding."""
        printer = StreamPrinter(io.BytesIO())

        assert printer.encoding == locale.getpreferredencoding(False)

    def test_writes_immediately_in_order(self) -> None:
        """Test that each print becomes one write on the stream."""
        writes: list[bytes] = []

        class Recorder(io.BytesIO):
            def write(self, data):  # type: ignore[override]
                writes.append(bytes(data))
                return super().write(data)

        printer = StreamPrinter(Recorder(), encoding="ascii")
        printer.print("a")
        printer.print(1)
        printer.print("b")

        assert writes == [b"a", b"1", b"b"]

    def test_byte_order_mark_written_once(self) -> None:
        """Test that a stateful codec starts the stream with a single BOM."""
        stream = io.BytesIO()
        printer = StreamPrinter(stream, encoding="utf-16")

        printer.print("<P>")
        printer.print("\n")
        printer.print("x")

        assert stream.getvalue() == "<P>\nx".encode("utf-16")
        assert stream.getvalue().count(codecs.BOM_UTF16) == 1

    def test_unknown_encoding_fails_early(self) -> None:
        """Test that a bad encoding name raises before anything is written."""
        stream = io.BytesIO()

        with pytest.raises(LookupError):
            StreamPrinter(stream, encoding="no-such-codec")

        assert stream.getvalue() == b""

    def test_encoding_error_propagates(self) -> None:
        """Test that unencodable text raises rather than being dropped."""
        printer = StreamPrinter(io.BytesIO(), encoding="ascii")

        with pytest.raises(UnicodeEncodeError):
            printer.print("☃")


class TestUnconfiguredSinkError:
    """Tests for UnconfiguredSinkError."""

    def test_default_message(self) -> None:
        """Test the default error message."""
        error = UnconfiguredSinkError()
        assert error.message == "No Printer defined on the Template"
        assert str(error) == error.message

    def test_custom_message(self) -> None:
        """Test a custom error message."""
        assert str(UnconfiguredSinkError("no sink")) == "no sink"
