from __future__ import annotations
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """
    An enumeration of the colors used by the prompt.  Each color's value
    equals its xterm number.
    """

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    CYAN = 6
    BRIGHT_BLACK = 8
    BRIGHT_WHITE = 15

    def asfg(self) -> int:
        """
        Return the ANSI SGR parameter for setting the color as the foreground
        color
        """
        c = self.value
        return c + 30 if c < 8 else c + 82

    def asbg(self) -> int:
        """
        Return the ANSI SGR parameter for setting the color as the background
        color
        """
        c = self.value
        return c + 40 if c < 8 else c + 92


#: The background color of the terminal that the prompt is drawn on
TERM_BG = Color.BLACK

#: The foreground color used for the text of most segments
POWERLINE_FG = Color.BLACK

#: The wedge drawn between segments
POWERLINE_SEP = "\uE0B0"


@dataclass
class Style:
    fg: Color | None = None
    bg: Color | None = None

    def as_params(self) -> list[str]:
        params = []
        if self.fg is not None:
            params.append(str(self.fg.asfg()))
        if self.bg is not None:
            params.append(str(self.bg.asbg()))
        return params


def stylize(s: str, style: Style) -> str:
    """
    Stylize the string ``s`` with ANSI escape sequences.  Colors are always
    emitted; no attempt is made to detect whether the terminal supports them.

    :param str s: the string to stylize
    :param Style style: the foreground & background colors to stylize the
        string with
    """
    if params := style.as_params():
        s = f"\x1B[{';'.join(params)}m{s}\x1B[m"
    return s


@dataclass(frozen=True)
class Segment:
    """A chunk of text drawn in its own colors as part of a powerline"""

    text: str
    fg: Color
    bg: Color

    def powerline(self, next_bg: Color) -> str:
        """
        Render the segment followed by a separator leading into a segment (or
        the terminal background) of color ``next_bg``
        """
        content = stylize(f" {self.text} ", Style(self.fg, self.bg))
        separator = stylize(POWERLINE_SEP, Style(self.bg, next_bg))
        return content + separator


def powerline(segments: Sequence[Segment]) -> str:
    """
    Render a sequence of segments as a powerline.  A wedge in the terminal's
    background color is drawn before the first segment, and each segment's
    trailing separator blends into the background of the segment after it.
    """
    s = ""
    for i, seg in enumerate(segments):
        if i == 0:
            s += stylize(POWERLINE_SEP, Style(TERM_BG, seg.bg))
        next_bg = segments[i + 1].bg if i + 1 < len(segments) else TERM_BG
        s += seg.powerline(next_bg)
    return s
