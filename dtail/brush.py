"""Colorize log lines by their kind: remote, client, server or plain."""

from __future__ import annotations

from .color import Attribute, BgColor, FgColor
from .config import CommonTermColors, TermColors
from .paint import paint_with_attr

FIELD_DELIMITER = "|"
"""Separates the fields of a log line."""


def _paint_severity(text: str, common: CommonTermColors) -> str | None:
    """Paint text in severity colors if it starts with a severity marker."""
    severities = (
        ("WARN", common.severity_warn_fg, common.severity_warn_bg,
         common.severity_warn_attr),
        ("ERROR", common.severity_error_fg, common.severity_error_bg,
         common.severity_error_attr),
        ("FATAL", common.severity_fatal_fg, common.severity_fatal_bg,
         common.severity_fatal_attr),
    )
    for prefix, fg, bg, attr in severities:
        if text.startswith(prefix):
            return paint_with_attr(text, fg, bg, attr)
    return None


def _paint_remote(line: str, colors: TermColors) -> str | None:
    parts = line.split(FIELD_DELIMITER, 5)
    if len(parts) < 6:
        return None
    remote = colors.remote
    delimiter = paint_with_attr(FIELD_DELIMITER, remote.delimiter_fg,
                                remote.delimiter_bg, remote.delimiter_attr)
    if parts[2] == "100":
        stats = paint_with_attr(parts[2], remote.stats_ok_fg, remote.stats_ok_bg,
                                remote.stats_ok_attr)
    else:
        stats = paint_with_attr(parts[2], remote.stats_warn_fg, remote.stats_warn_bg,
                                remote.stats_warn_attr)
    text = _paint_severity(parts[5], colors.common)
    if text is None:
        text = paint_with_attr(parts[5], remote.text_fg, remote.text_bg,
                               remote.text_attr)
    return "".join((
        paint_with_attr(parts[0], remote.remote_fg, remote.remote_bg,
                        remote.remote_attr),
        delimiter,
        paint_with_attr(parts[1], remote.hostname_fg, remote.hostname_bg,
                        remote.hostname_attr),
        delimiter,
        stats,
        delimiter,
        paint_with_attr(parts[3], remote.count_fg, remote.count_bg, remote.count_attr),
        delimiter,
        paint_with_attr(parts[4], remote.id_fg, remote.id_bg, remote.id_attr),
        delimiter,
        text,
    ))


def _paint_three_fields(line: str, head: tuple, delimiter_colors: tuple,
                        hostname_colors: tuple, text_colors: tuple,
                        common: CommonTermColors) -> str | None:
    parts = line.split(FIELD_DELIMITER, 2)
    if len(parts) < 3:
        return None
    delimiter = paint_with_attr(FIELD_DELIMITER, *delimiter_colors)
    text = _paint_severity(parts[2], common)
    if text is None:
        text = paint_with_attr(parts[2], *text_colors)
    return "".join((
        paint_with_attr(parts[0], *head),
        delimiter,
        paint_with_attr(parts[1], *hostname_colors),
        delimiter,
        text,
    ))


def _paint_client(line: str, colors: TermColors) -> str | None:
    c = colors.client
    return _paint_three_fields(
        line,
        (c.client_fg, c.client_bg, c.client_attr),
        (c.delimiter_fg, c.delimiter_bg, c.delimiter_attr),
        (c.hostname_fg, c.hostname_bg, c.hostname_attr),
        (c.text_fg, c.text_bg, c.text_attr),
        colors.common,
    )


def _paint_server(line: str, colors: TermColors) -> str | None:
    s = colors.server
    return _paint_three_fields(
        line,
        (s.server_fg, s.server_bg, s.server_attr),
        (s.delimiter_fg, s.delimiter_bg, s.delimiter_attr),
        (s.hostname_fg, s.hostname_bg, s.hostname_attr),
        (s.text_fg, s.text_bg, s.text_attr),
        colors.common,
    )


_PAINTERS = (
    ("REMOTE", _paint_remote),
    ("CLIENT", _paint_client),
    ("SERVER", _paint_server),
)


def colorfy(line: str, colors: TermColors | None = None) -> str:
    """Colorize a line based on its content.

    Lines without enough fields for their kind are painted in default colors.
    """
    colors = colors if colors is not None else TermColors()
    for prefix, painter in _PAINTERS:
        if line.startswith(prefix):
            painted = painter(line, colors)
            if painted is not None:
                return painted
            break
    return paint_with_attr(line, FgColor.DEFAULT, BgColor.DEFAULT, Attribute.NONE)