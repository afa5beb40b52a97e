"""Log levels, ordered from least to most verbose."""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """How much gets logged; a logger logs every level up to its maximum."""

    NONE = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEFAULT = 5
    VERBOSE = 6
    DEBUG = 7
    DEVEL = 8
    TRACE = 9
    ALL = 10

    def __str__(self) -> str:
        return self.name


_ALL_LEVELS = [level for level in Level if level is not Level.NONE]

_BY_NAME = {level.name.lower(): level for level in Level}
_BY_NAME[""] = Level.DEFAULT


def parse_level(name: str) -> Level:
    """Parse a level name (case insensitive); an empty name means DEFAULT."""
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        choices = " ".join(str(level) for level in _ALL_LEVELS)
        raise ValueError(
            f"Unknown log level {name}, must be one of: [{choices}]"
        ) from None