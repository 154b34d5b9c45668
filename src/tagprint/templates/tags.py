"""Tag shorthands built on the TextTemplate primitives.

Every helper here is a free function over a template, using only ``tag``,
``print`` and ``println``. New shorthands follow the same pattern and need
no subclassing.

Nothing is escaped: attribute values and text are interpolated as given.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tagprint.templates.core import Block, Content, TextTemplate


def h2(t: "TextTemplate", content: "Content") -> None:
    t.tag("H2", content)


def h3(t: "TextTemplate", content: "Content") -> None:
    t.tag("H3", content)


def ul(t: "TextTemplate", content: "Content") -> None:
    t.tag("UL", content)


def li(t: "TextTemplate", content: "Content") -> None:
    t.tag("LI", content)


def b(t: "TextTemplate", content: "Content") -> None:
    t.tag("B", content)


def code(t: "TextTemplate", content: "Content") -> None:
    t.tag("CODE", content)


def noscript(t: "TextTemplate", content: "Block") -> None:
    t.tag("NOSCRIPT", content)


def hr(t: "TextTemplate") -> None:
    t.tag("HR")


def p(t: "TextTemplate") -> None:
    t.tag("P")


def br(t: "TextTemplate") -> None:
    t.tag("BR")


def _inline(t: "TextTemplate", content: Any) -> None:
    """Emit content without line breaks: call a block, print anything else."""
    if callable(content):
        content(t)
    else:
        t.print(content)


def a(
    t: "TextTemplate",
    href: str,
    content: "Content",
    title: str | None = None,
) -> None:
    """Emit an anchor on a single line.

    The title attribute follows HREF with no separating space:
    ``<A HREF='x'title='y'>``. Existing output depends on that form.

    Args:
        t: Template to write through
        href: Link target, interpolated unescaped
        content: Anchor text or a block emitting it
        title: Optional title, interpolated unescaped
    """
    t.print(f"<A HREF='{href}'")
    if title is not None:
        t.print(f"title='{title}'")
    t.print(">")
    _inline(t, content)
    t.print("</A>")
    t.println()


def font(t: "TextTemplate", size: str, content: "Content") -> None:
    """Emit ``<FONT SIZE='size'>content</FONT>`` on a single line."""
    t.print(f"<FONT SIZE='{size}'>")
    _inline(t, content)
    t.print("</FONT>")
    t.println()


def comment(t: "TextTemplate", text: str) -> None:
    t.println(f"<!-- {text} -->")


def nbsp(t: "TextTemplate", count: int = 1) -> None:
    """Emit non-breaking spaces.

    Emits ``count + 1`` entities (``nbsp(2)`` gives three), written without
    a trailing semicolon as ``&nbsp``.
    """
    for _ in range(count + 1):
        t.print("&nbsp")
