import pytest

from dtail.color import (
    ATTRIBUTE_NAMES,
    COLOR_NAMES,
    Attribute,
    BgColor,
    FgColor,
    to_attribute,
    to_bg_color,
    to_fg_color,
)


@pytest.mark.parametrize("name", COLOR_NAMES)
def test_colors_convert(name):
    fg = to_fg_color(name)
    bg = to_bg_color(name)
    assert fg is FgColor[name.upper()]
    assert bg is BgColor[name.upper()]


@pytest.mark.parametrize("name", ATTRIBUTE_NAMES)
def test_attributes_convert(name):
    assert isinstance(to_attribute(name), Attribute)
    assert to_attribute(name) == to_attribute(name.upper())


def test_known_codes():
    assert to_fg_color("red").value == "\x1b[31m"
    assert to_bg_color("BLUE").value == "\x1b[44m"
    assert to_attribute("bold").value == "\x1b[1m"


def test_none_and_empty_attribute():
    assert to_attribute("none") is Attribute.NONE
    assert to_attribute("") is Attribute.NONE
    assert Attribute.NONE.value == ""


def test_slow_blink_is_blink():
    assert to_attribute("slowblink").value == to_attribute("blink").value


def test_unknown_fg():
    with pytest.raises(ValueError, match="unknown foreground text color 'purple'"):
        to_fg_color("purple")


def test_unknown_bg():
    with pytest.raises(ValueError, match="unknown background text color 'purple'"):
        to_bg_color("purple")


def test_unknown_attribute():
    with pytest.raises(ValueError, match="unknown text attribute 'sparkly'"):
        to_attribute("sparkly")