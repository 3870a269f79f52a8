"""Reporting operating-system errors the way the C library does."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO

DEFAULT_MISSING_FILE = "the missing file"


def describe_error(error: OSError | int) -> str:
    """The system message for an error or an error number."""
    if isinstance(error, int):
        return os.strerror(error)
    if error.errno:
        return os.strerror(error.errno)
    return str(error)


def report_error(label: str | None, error: OSError | int, err: TextIO | None = None) -> None:
    """Write ``label: message`` to ``err``; without a label, the message alone."""
    stream = sys.stderr if err is None else err
    message = describe_error(error)
    stream.write(f"{label}: {message}\n" if label else f"{message}\n")


def check_file(path: str, err: TextIO | None = None) -> int:
    """Open ``path`` for reading; report failure and return 1, else return 0."""
    try:
        with open(path, "rb"):
            pass
    except OSError as error:
        report_error("open", error, err)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Try to open the given file, or a file that should not exist."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_MISSING_FILE
    return check_file(path)