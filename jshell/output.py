"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO

from jshell.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write one character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write a string as is."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    target = _target(stream)
    target.write(text)
    target.write("\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(itoa(number))