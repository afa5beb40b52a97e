"""Wrap text in terminal color escape codes."""

from __future__ import annotations

from collections.abc import Iterable

from .color import Attribute, BgColor, FgColor


def paint_str(text: str, fg: FgColor, bg: BgColor) -> str:
    """Paint text in a foreground/background color combination."""
    return f"{fg.value}{bg.value}{text}{BgColor.DEFAULT.value}{FgColor.DEFAULT.value}"


def paint_str_with_attr(text: str, fg: FgColor, bg: BgColor, attr: Attribute) -> str:
    """Paint text in a foreground/background/attribute combination."""
    if attr is Attribute.NONE:
        return paint_str(text, fg, bg)
    return (
        f"{fg.value}{bg.value}{attr.value}{text}{Attribute.RESET.value}"
        f"{BgColor.DEFAULT.value}{FgColor.DEFAULT.value}"
    )


def paint_str_fg(text: str, fg: FgColor) -> str:
    """Paint text in a foreground color."""
    return f"{fg.value}{text}{FgColor.DEFAULT.value}"


def paint_str_bg(text: str, bg: BgColor) -> str:
    """Paint text in a background color."""
    return f"{bg.value}{text}{BgColor.DEFAULT.value}"


def paint_str_attr(text: str, attr: Attribute) -> str:
    """Add an attribute such as bold or italic to text."""
    return f"{attr.value}{text}{Attribute.RESET.value}"


def _wrap(text: str, prefix: str, suffix: str) -> str:
    """Wrap text, keeping a single trailing newline outside the codes."""
    trimmed = text.removesuffix("\n")
    newline = "\n" if trimmed != text else ""
    return f"{prefix}{trimmed}{suffix}{newline}"


def reset() -> str:
    """Codes resetting background and foreground colors."""
    return BgColor.DEFAULT.value + FgColor.DEFAULT.value


def reset_with_attr() -> str:
    """Codes resetting attributes, background and foreground colors."""
    return Attribute.RESET.value + reset()


def paint(text: str, fg: FgColor, bg: BgColor) -> str:
    """Paint text; a trailing newline is kept after the reset codes."""
    return _wrap(text, fg.value + bg.value, reset())


def paint_with_attr(text: str, fg: FgColor, bg: BgColor, attr: Attribute) -> str:
    """Paint text with an attribute; a trailing newline stays after the codes."""
    if attr is Attribute.NONE:
        return paint(text, fg, bg)
    return _wrap(text, fg.value + bg.value + attr.value, reset_with_attr())


def paint_with_attrs(
    text: str, fg: FgColor, bg: BgColor, attrs: Iterable[Attribute]
) -> str:
    """Paint text with several attributes at once."""
    prefix = fg.value + bg.value + "".join(attr.value for attr in attrs)
    return _wrap(text, prefix, reset_with_attr())