"""Terminal color and text attribute escape codes."""

from __future__ import annotations

from enum import Enum

_ESCAPE = "\x1b"


class FgColor(str, Enum):
    """Text foreground color."""

    BLACK = _ESCAPE + "[30m"
    RED = _ESCAPE + "[31m"
    GREEN = _ESCAPE + "[32m"
    YELLOW = _ESCAPE + "[33m"
    BLUE = _ESCAPE + "[34m"
    MAGENTA = _ESCAPE + "[35m"
    CYAN = _ESCAPE + "[36m"
    WHITE = _ESCAPE + "[37m"
    DEFAULT = _ESCAPE + "[39m"


class BgColor(str, Enum):
    """Text background color."""

    BLACK = _ESCAPE + "[40m"
    RED = _ESCAPE + "[41m"
    GREEN = _ESCAPE + "[42m"
    YELLOW = _ESCAPE + "[43m"
    BLUE = _ESCAPE + "[44m"
    MAGENTA = _ESCAPE + "[45m"
    CYAN = _ESCAPE + "[46m"
    WHITE = _ESCAPE + "[47m"
    DEFAULT = _ESCAPE + "[49m"


class Attribute(str, Enum):
    """Text attribute such as bold or underline."""

    NONE = ""
    RESET = _ESCAPE + "[0m"
    BOLD = _ESCAPE + "[1m"
    DIM = _ESCAPE + "[2m"
    ITALIC = _ESCAPE + "[3m"
    UNDERLINE = _ESCAPE + "[4m"
    BLINK = _ESCAPE + "[5m"
    SLOW_BLINK = _ESCAPE + "[5m"
    RAPID_BLINK = _ESCAPE + "[6m"
    REVERSE = _ESCAPE + "[7m"
    HIDDEN = _ESCAPE + "[8m"


COLOR_NAMES = (
    "Black", "Red", "Green", "Yellow", "Blue", "Magenta", "Cyan", "White", "Default",
)

ATTRIBUTE_NAMES = (
    "Bold", "Dim", "Italic", "Underline", "Blink", "SlowBlink", "RapidBlink",
    "Reverse", "Hidden", "None",
)

_COLOR_KEYS = {name.lower(): name.upper() for name in COLOR_NAMES}

_ATTRIBUTES = {
    "bold": Attribute.BOLD,
    "dim": Attribute.DIM,
    "italic": Attribute.ITALIC,
    "underline": Attribute.UNDERLINE,
    "blink": Attribute.BLINK,
    "slowblink": Attribute.SLOW_BLINK,
    "rapidblink": Attribute.RAPID_BLINK,
    "reverse": Attribute.REVERSE,
    "hidden": Attribute.HIDDEN,
    "none": Attribute.NONE,
    "": Attribute.NONE,
}


def to_fg_color(name: str) -> FgColor:
    """Convert a color name (case insensitive) into a foreground color."""
    key = _COLOR_KEYS.get(name.lower())
    if key is None:
        raise ValueError(f"unknown foreground text color '{name}'")
    return FgColor[key]


def to_bg_color(name: str) -> BgColor:
    """Convert a color name (case insensitive) into a background color."""
    key = _COLOR_KEYS.get(name.lower())
    if key is None:
        raise ValueError(f"unknown background text color '{name}'")
    return BgColor[key]


def to_attribute(name: str) -> Attribute:
    """Convert an attribute name (case insensitive) into a text attribute."""
    try:
        return _ATTRIBUTES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown text attribute '{name}'") from None