"""tagprint - Tag-composing text templates.

tagprint builds HTML-like markup by composing nested tag calls inside a
template's ``render()`` body. Every call is written straight through a
pluggable Printer to its destination (a string buffer, a byte stream or a
file); nothing is buffered in between.

Core principles:
- Immediate output: render order is call order, no intermediate tree
- Explicit sinks: rendering without a destination fails loudly
- Deterministic separators: the line separator is configuration, not global state
- No escaping: interpolated text is written as given
"""

from tagprint.printers import (
    NullPrinter,
    Printer,
    StreamPrinter,
    UnconfiguredSinkError,
    WriterPrinter,
)
from tagprint.templates import Template, TextTemplate

__version__ = "0.1.0"
__author__ = "tagprint Contributors"

__all__ = [
    "NullPrinter",
    "Printer",
    "StreamPrinter",
    "Template",
    "TextTemplate",
    "UnconfiguredSinkError",
    "WriterPrinter",
]
