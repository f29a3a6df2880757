"""Terminal reporting for upload runs.

Status lines carry a colored marker when the target stream is a terminal.
File listings are always plain so they can be piped into other tools.
"""

import sys
from collections.abc import Iterable
from typing import TextIO

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
RESET = "\033[0m"

DONE_MARK = "\u2713"  # ✓
NOTE_MARK = "\u2022"  # •
FAIL_MARK = "\u2717"  # ✗


def _paint(text: str, color: str, stream: TextIO) -> str:
    """Wrap text in color codes when stream is an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        return f"{color}{text}{RESET}"
    return text


def _status(mark: str, color: str, message: str, stream: TextIO) -> None:
    print(f"{_paint(mark, color, stream)} {message}", file=stream)


def success(message: str) -> None:
    """Report a completed step, e.g. the final push."""
    _status(DONE_MARK, GREEN, message, sys.stdout)


def info(message: str) -> None:
    """Report a side effect worth knowing about (ignore file, new repository)."""
    _status(NOTE_MARK, YELLOW, message, sys.stdout)


def header(message: str) -> None:
    """Print a section title such as the dry-run heading."""
    print(_paint(message, BLUE, sys.stdout))


def error(message: str) -> None:
    """Report a fatal problem on stderr."""
    _status(FAIL_MARK, RED, message, sys.stderr)


def listing(items: Iterable[object]) -> None:
    """Print one item per line with no decoration."""
    for item in items:
        print(item)
