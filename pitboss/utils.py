"""Input helpers for the text interface."""

from __future__ import annotations

import sys
from typing import TextIO

_SIGNS = "+-"
_DIGITS = "0123456789"


def normalize_input(text: str) -> str:
    """Strip surrounding whitespace and lower-case ``text``."""
    return text.strip().lower()


def read_command(stream: TextIO | None = None) -> str:
    """Read one line from ``stream`` (standard input by default), normalised.

    Raises EOFError when the stream is exhausted.
    """
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if line == "":
        raise EOFError("no more input")
    return normalize_input(line)


def is_integer(text: str) -> bool:
    """Whether ``text``, once stripped, is an optional sign followed by ASCII digits."""
    source = text.strip()
    if not source:
        return False
    first, rest = source[0], source[1:]
    if first not in _SIGNS and first not in _DIGITS:
        return False
    return all(ch in _DIGITS for ch in rest)