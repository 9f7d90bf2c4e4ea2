from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
import math
import os
from pathlib import Path, PurePath
import re
from .git import GitStatus, git_status
from .styles import POWERLINE_FG, Color, Segment, Style, powerline, stylize
from .util import format_duration

#: Glyph shown in front of a failed command's exit code
FAILURE_GLYPH = "✖"

#: The actual prompt symbol at the end of the output, just before a final space
#: character
PROMPT_MARKER = "▶"

#: Color of the clock & prompt marker on the line after the powerline
STATUS_FG = Color.BRIGHT_BLACK

#: Range of exit codes accepted on the command line (those of a signed 32-bit
#: integer)
EXIT_CODE_MIN = -(2**31)
EXIT_CODE_MAX = 2**31 - 1


@dataclass
class PromptInfo:
    #: The exit code of the previous command, or `None` if the exit code
    #: argument could not be parsed as an integer
    exit_code: int | None

    #: How long the previous command took to run, in milliseconds, or `None`
    #: if not known
    duration: float | None

    #: The path to the current working directory.  If the directory is at or
    #: under the home directory, the path will start with ``~``.
    cwdstr: str

    git: GitStatus | None

    #: The current time of day as ``HH:MM``
    clock: str

    @classmethod
    def get(
        cls, exit_code: str | None = None, duration: str | None = None
    ) -> PromptInfo:
        """
        Gather information about the current environment.  ``exit_code`` and
        ``duration`` are the unparsed command-line arguments describing the
        previous command.

        :raises OSError: if the current working directory cannot be determined
        """
        cwd = os.getcwd()
        return cls(
            exit_code=parse_exit_code(exit_code),
            duration=parse_duration(duration),
            cwdstr=cwdstr(Path(cwd), get_home()),
            git=git_status(cwd),
            clock=datetime.now().strftime("%H:%M"),
        )

    def segments(self) -> list[Segment]:
        """Return the segments of the powerline, in display order"""
        segs = []
        # Show the exit code of the previous command if it failed:
        if self.exit_code != 0:
            if self.exit_code is None:
                text = FAILURE_GLYPH
            else:
                text = f"{FAILURE_GLYPH} {self.exit_code}"
            segs.append(Segment(text, fg=Color.RED, bg=Color.BRIGHT_WHITE))
        if self.duration is not None:
            segs.append(
                Segment(format_duration(self.duration), fg=POWERLINE_FG, bg=Color.CYAN)
            )
        segs.append(Segment(self.cwdstr, fg=POWERLINE_FG, bg=Color.BLUE))
        if self.git is not None:
            segs.append(self.git.segment())
        return segs

    def display(self) -> str:
        """
        Construct & return a complete prompt string for the current environment
        """
        ps1 = "\n" + powerline(self.segments()) + "\n"
        ps1 += stylize(self.clock, Style(STATUS_FG))
        ps1 += " "
        ps1 += stylize(PROMPT_MARKER, Style(STATUS_FG))
        ps1 += " "
        return ps1


def parse_exit_code(arg: str | None) -> int | None:
    """
    Parse the exit code argument.  A missing argument is treated as success
    (0); an argument that is not a signed 32-bit decimal integer yields `None`.
    """
    if arg is None:
        return 0
    if not re.fullmatch(r"[+-]?[0-9]+", arg):
        return None
    code = int(arg)
    if not EXIT_CODE_MIN <= code <= EXIT_CODE_MAX:
        return None
    return code


def parse_duration(arg: str | None) -> float | None:
    """
    Parse the duration argument as a number of milliseconds.  Returns `None`
    if the argument is missing, is not a number, or is negative or infinite.
    """
    if arg is None:
        return None
    try:
        millis = float(arg)
    except ValueError:
        return None
    if not math.isfinite(millis) or millis < 0:
        return None
    # Turn "-0" into 0
    return abs(millis)


def get_home() -> Path | None:
    """Return the user's home directory, or `None` if it cannot be determined"""
    try:
        return Path.home()
    except (KeyError, RuntimeError):
        return None


def cwdstr(cwd: PurePath, home: PurePath | None) -> str:
    """
    Show the path ``cwd``.  If it is at or under ``home``, the path will start
    with ``~``.  Separators are always shown as forward slashes.
    """
    if home is not None:
        try:
            cwd = "~" / cwd.relative_to(home)
        except ValueError:
            pass
    # Pure paths never keep a trailing separator except on a bare root (e.g.,
    # "/" or "C:\"), which is left as-is.
    return cwd.as_posix()
