"""tagprint templates.

This module provides the Template base and TextTemplate, the tag-composing
builder that writes through a Printer, plus free-function tag shorthands.
"""

from tagprint.templates.core import Block, Content, Template, TextTemplate

__all__ = ["Block", "Content", "Template", "TextTemplate"]
