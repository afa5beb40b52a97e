from dtail.color import Attribute, BgColor, FgColor
from dtail.paint import (
    paint,
    paint_str,
    paint_str_attr,
    paint_str_bg,
    paint_str_fg,
    paint_str_with_attr,
    paint_with_attr,
    paint_with_attrs,
    reset,
    reset_with_attr,
)


def test_paint_str_fg_pinned():
    assert paint_str_fg("x", FgColor.RED) == "\x1b[31mx\x1b[39m"


def test_paint_str_bg_wraps_text():
    out = paint_str_bg("hello", BgColor.GREEN)
    assert out.startswith(BgColor.GREEN.value)
    assert out.endswith(BgColor.DEFAULT.value)
    assert "hello" in out


def test_paint_str_attr_ends_with_reset():
    out = paint_str_attr("hi", Attribute.BOLD)
    assert out.startswith(Attribute.BOLD.value)
    assert out.endswith(Attribute.RESET.value)


def test_paint_str_with_none_attr_is_paint_str():
    assert paint_str_with_attr("t", FgColor.WHITE, BgColor.BLUE, Attribute.NONE) == \
        paint_str("t", FgColor.WHITE, BgColor.BLUE)


def test_paint_str_with_attr_contains_attr_and_reset():
    out = paint_str_with_attr("t", FgColor.WHITE, BgColor.BLUE, Attribute.ITALIC)
    assert Attribute.ITALIC.value in out
    assert out.endswith(reset_with_attr())


def test_paint_without_newline_matches_paint_str():
    assert paint("abc", FgColor.CYAN, BgColor.BLACK) == \
        paint_str("abc", FgColor.CYAN, BgColor.BLACK)


def test_paint_keeps_newline_outside():
    with_nl = paint("abc\n", FgColor.CYAN, BgColor.BLACK)
    assert with_nl.endswith(reset() + "\n")
    assert with_nl[:-1] == paint("abc", FgColor.CYAN, BgColor.BLACK)


def test_paint_with_attr_none_is_paint():
    assert paint_with_attr("a\n", FgColor.RED, BgColor.WHITE, Attribute.NONE) == \
        paint("a\n", FgColor.RED, BgColor.WHITE)


def test_paint_with_attrs_single_equals_paint_with_attr():
    assert paint_with_attrs("a\n", FgColor.RED, BgColor.WHITE, [Attribute.BOLD]) == \
        paint_with_attr("a\n", FgColor.RED, BgColor.WHITE, Attribute.BOLD)


def test_paint_with_attrs_multiple():
    out = paint_with_attrs("a", FgColor.RED, BgColor.WHITE,
                           [Attribute.BOLD, Attribute.UNDERLINE])
    assert Attribute.BOLD.value + Attribute.UNDERLINE.value + "a" in out


def test_reset_with_attr_extends_reset():
    assert reset_with_attr() == Attribute.RESET.value + reset()