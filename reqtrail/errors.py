"""Printing errors to a terminal in a readable, coloured block."""

from __future__ import annotations

import sys
from typing import TextIO, TypeVar

E = TypeVar("E", bound=BaseException)

RED = "\x1b[38;5;9m"
RESET = "\x1b[39m"
_RULE = "-------------------------------"


def _cause_of(error: BaseException) -> BaseException | None:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def print_pretty_error(error: E, stream: TextIO | None = None) -> E:
    """Write ``error`` and its direct cause to ``stream`` (stderr by default).

    The error is returned unchanged so the call can sit inside a ``raise``.
    """
    out = stream if stream is not None else sys.stderr

    out.write(RED)
    out.write(f"{_RULE}\n")
    out.write(" Error:\n")
    out.write(RESET)
    out.write(f"  {error}\n")

    cause = _cause_of(error)
    if cause is not None:
        out.write("\n\n")
        out.write(RED)
        out.write(" Caused by:\n")
        out.write(RESET)
        out.write(f"  {cause}\n")

    out.write(RED)
    out.write(f"{_RULE}\n")
    out.write(RESET)
    out.flush()
    return error