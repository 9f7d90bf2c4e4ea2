from __future__ import annotations
import pytest
from powerprompt.styles import Color, Segment, Style, powerline, stylize

SEP = "\uE0B0"


@pytest.mark.parametrize(
    "color,fg,bg",
    [
        (Color.BLACK, 30, 40),
        (Color.RED, 31, 41),
        (Color.BLUE, 34, 44),
        (Color.CYAN, 36, 46),
        (Color.BRIGHT_BLACK, 90, 100),
        (Color.BRIGHT_WHITE, 97, 107),
    ],
)
def test_color_params(color: Color, fg: int, bg: int) -> None:
    assert color.asfg() == fg
    assert color.asbg() == bg


@pytest.mark.parametrize(
    "style,styled",
    [
        (Style(), "foo"),
        (Style(Color.BRIGHT_BLACK), "\x1B[90mfoo\x1B[m"),
        (Style(bg=Color.GREEN), "\x1B[42mfoo\x1B[m"),
        (Style(Color.RED, Color.BRIGHT_WHITE), "\x1B[31;107mfoo\x1B[m"),
    ],
)
def test_stylize(style: Style, styled: str) -> None:
    assert stylize("foo", style) == styled


def test_powerline_empty() -> None:
    assert powerline([]) == ""


def test_powerline_single_segment() -> None:
    segs = [Segment("~/work", fg=Color.BLACK, bg=Color.BLUE)]
    s = powerline(segs)
    assert s == (
        f"\x1B[30;44m{SEP}\x1B[m"
        "\x1B[30;44m ~/work \x1B[m"
        f"\x1B[34;40m{SEP}\x1B[m"
    )
    assert s.count(SEP) == 2


def test_powerline_separator_colors() -> None:
    segs = [
        Segment("✖ 1", fg=Color.RED, bg=Color.BRIGHT_WHITE),
        Segment("~/work", fg=Color.BLACK, bg=Color.BLUE),
        Segment("main", fg=Color.BLACK, bg=Color.YELLOW),
    ]
    assert powerline(segs) == (
        f"\x1B[30;107m{SEP}\x1B[m"
        "\x1B[31;107m ✖ 1 \x1B[m"
        f"\x1B[97;44m{SEP}\x1B[m"
        "\x1B[30;44m ~/work \x1B[m"
        f"\x1B[34;43m{SEP}\x1B[m"
        "\x1B[30;43m main \x1B[m"
        f"\x1B[33;40m{SEP}\x1B[m"
    )
