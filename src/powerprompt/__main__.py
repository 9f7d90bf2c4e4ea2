from __future__ import annotations
import argparse
import logging
import sys
from . import __version__
from .info import PromptInfo

#: Options that are only recognized ahead of the positional arguments
LEADING_OPTIONS = frozenset({"--debug", "-h", "--help", "-V", "--version"})


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Yet another powerline-style shell prompt"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log diagnostic information to stderr",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="ARG",
        help=(
            "Exit code of the previous command and how long it took to run, in"
            " milliseconds.  Any further arguments are ignored."
        ),
    )
    args = parser.parse_args(split_options(sys.argv[1:] if argv is None else argv))
    if args.debug:
        logging.basicConfig(
            format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            level=logging.DEBUG,
        )
    exit_code, duration, *_ = [*args.arguments, None, None]
    print(PromptInfo.get(exit_code=exit_code, duration=duration).display())


def split_options(argv: list[str]) -> list[str]:
    """
    Insert a ``--`` after the leading options in ``argv`` so that everything
    after them, including values that start with a hyphen, is treated as a
    positional argument
    """
    i = 0
    while i < len(argv) and argv[i] in LEADING_OPTIONS:
        i += 1
    return [*argv[:i], "--", *argv[i:]]


if __name__ == "__main__":
    main()
