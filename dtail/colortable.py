"""Render a table of all terminal color combinations."""

from __future__ import annotations

import argparse
import sys

from .color import ATTRIBUTE_NAMES, COLOR_NAMES, to_attribute, to_bg_color, to_fg_color
from .paint import paint_str_with_attr

SAMPLE_PARAGRAPH = (
    "Log lines stream in from many servers at once. Each line carries the "
    "name of the host it came from, the share of lines that made it through "
    "the filter, and the text itself. Colors help to tell apart what came "
    "from a remote server, what the client reports about itself and what is "
    "a warning or an error that needs a closer look."
)

_SKIPPED_ATTRIBUTES = {"Hidden", "SlowBlink"}


def _lines(attr: str, display_sample_paragraph: bool):
    attribute = to_attribute(attr)
    for fg in COLOR_NAMES:
        fg_color = to_fg_color(fg)
        for bg in COLOR_NAMES:
            if fg == bg:
                continue
            bg_color = to_bg_color(bg)
            text = (
                f" Foreground:{fg:>10}  |  Background:{bg:>10}  |  "
                f"Attribute:{attr:>10} "
            )
            yield paint_str_with_attr(text, fg_color, bg_color, attribute)
            if display_sample_paragraph:
                yield "\n"
                yield paint_str_with_attr(SAMPLE_PARAGRAPH, fg_color, bg_color, attribute)
                yield "\n"
            yield "\n"


def color_table(display_sample_paragraph: bool = False) -> str:
    """Return the color table, optionally with a sample paragraph per entry."""
    return "".join(
        part
        for attr in ATTRIBUTE_NAMES
        if attr not in _SKIPPED_ATTRIBUTES
        for part in _lines(attr, display_sample_paragraph)
    )


def main(argv=None) -> int:
    """Print the color table."""
    parser = argparse.ArgumentParser(description="Show the terminal color table.")
    parser.add_argument("--wide", action="store_true",
                        help="show a sample paragraph for each combination")
    args = parser.parse_args(argv)
    sys.stdout.write(color_table(args.wide))
    return 0