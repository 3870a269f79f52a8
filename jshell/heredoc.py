"""Detecting ``<<`` redirections and collecting here-document input."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO

HEREDOC_NAME = "/tmp/.minishell_heredoc_"
PROMPT = "heredoc> "
OPERATOR = "<<"


class HeredocSyntaxError(ValueError):
    """Raised when a ``<<`` operator has no delimiter after it."""


def find_heredoc(args: Sequence[str]) -> int | None:
    """Index of the first word starting with ``<<``, or None."""
    return next(
        (index for index, word in enumerate(args) if word.startswith(OPERATOR)),
        None,
    )


def get_delimiter(args: Sequence[str], index: int) -> str:
    """The delimiter of the ``<<`` operator at ``index``.

    A bare ``<<`` takes the next word; ``<<WORD`` carries its own.
    """
    word = args[index]
    if word == OPERATOR:
        if index + 1 >= len(args):
            raise HeredocSyntaxError("syntax error near unexpected token `newline'")
        return args[index + 1]
    return word[len(OPERATOR):]


def _create(path: str, flags: int) -> int:
    return os.open(path, flags, 0o644)


def read_heredoc(
    delimiter: str | None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    path: str = HEREDOC_NAME,
) -> str | None:
    """Prompt for lines until ``delimiter`` or end of input, saving them to ``path``.

    Lines are stored without their newlines. Returns the text written, or
    None when there is no delimiter, in which case nothing is read.
    """
    if delimiter is None:
        return None
    source = sys.stdin if stdin is None else stdin
    prompt_stream = sys.stdout if stdout is None else stdout
    collected: list[str] = []
    with open(path, "w", opener=_create) as target:
        while True:
            prompt_stream.write(PROMPT)
            prompt_stream.flush()
            line = source.readline()
            if not line:
                break
            if line.endswith("\n"):
                line = line[:-1]
            if line == delimiter:
                break
            target.write(line)
            collected.append(line)
    return "".join(collected)