"""
Tests for ANSI helpers
"""

import pytest

from tchat.ansi import paint, parse_hex_color, strip_ansi


def test_paint_plain():
    assert paint("x", (1, 2, 3)) == "\033[38;2;1;2;3mx\033[0m"


def test_paint_bold():
    assert paint("Ann", (1, 2, 3), bold=True) == "\033[1;38;2;1;2;3mAnn\033[0m"


def test_paint_italic():
    assert paint("Ann", (1, 2, 3), bold=True, italic=True) == "\033[1;3;38;2;1;2;3mAnn\033[0m"
    assert paint("Ann", None, italic=True) == "\033[3mAnn\033[0m"


def test_paint_without_attributes_is_plain_text():
    assert paint("Ann", None) == "Ann"


@pytest.mark.parametrize(
    "text",
    [
        "\033[1;38;2;1;2;3mAnn\033[0m: hi\n",
        "\033[31mred\033[m and \033[2K\033[Acursor",
        "\033]0;title\007visible",
    ],
)
def test_strip_removes_escapes_and_is_idempotent(text):
    once = strip_ansi(text)
    assert "\033" not in once
    assert strip_ansi(once) == once


def test_strip_preserves_other_characters():
    text = "  tabs\tand ünïcödé 💜 | pipes | !100!\n"
    assert strip_ansi(text) == text
    assert strip_ansi(paint(text, (9, 9, 9))) == text


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("#FF0000", (255, 0, 0)),
        ("#1e90ff", (30, 144, 255)),
        ("", None),
        ("FF0000", None),
        ("#GG0000", None),
        ("#FFF", None),
    ],
)
def test_parse_hex_color(value, expected):
    assert parse_hex_color(value) == expected
