"""Splitting command lines into words and search paths into candidates."""

from __future__ import annotations

from itertools import groupby

DEFAULT_DELIMITERS = " \a\b\t\n\v\f\r"


def split_words(text: str, charset: str = DEFAULT_DELIMITERS) -> list[str]:
    """Maximal runs of characters not in ``charset``, in order."""
    return [
        "".join(run)
        for is_delimiter, run in groupby(text, key=lambda char: char in charset)
        if not is_delimiter
    ]


def count_words(text: str, charset: str = DEFAULT_DELIMITERS) -> int:
    """Number of words ``split_words`` would return."""
    return sum(
        1
        for is_delimiter, _ in groupby(text, key=lambda char: char in charset)
        if not is_delimiter
    )


def candidate_paths(path_list: str, command: str) -> list[str]:
    """``dir/command`` for each non-empty directory of a colon-separated list."""
    return [f"{directory}/{command}" for directory in split_words(path_list, ":")]