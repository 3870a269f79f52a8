"""A minimal prompt that understands only ``cd``."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO

from jshell.diagnostics import report_error

PROMPT = "minishell> "
UNKNOWN_MESSAGE = "Command not recognized: "


def change_directory(path: str | None = None, err: TextIO | None = None) -> int:
    """Change to ``path``, or to HOME without one; report failures as ``cd``."""
    stream = sys.stderr if err is None else err
    target = os.environ.get("HOME") if path is None else path
    if target is None:
        report_error("cd", FileNotFoundError(2, "HOME not set"), stream)
        return 1
    try:
        os.chdir(target)
    except OSError as error:
        report_error("cd", error, stream)
        return 1
    return 0


def parse_input(line: str) -> tuple[str | None, str | None]:
    """The command and its first argument from a line, split on spaces."""
    newline = line.find("\n")
    if newline >= 0:
        line = line[:newline]
    words = [word for word in line.split(" ") if word]
    command = words[0] if words else None
    argument = words[1] if len(words) > 1 else None
    return command, argument


def run_prompt(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Prompt for lines until end of input, running ``cd`` and rejecting the rest."""
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    err = sys.stderr if stderr is None else stderr
    while True:
        out.write(PROMPT)
        out.flush()
        line = source.readline()
        if not line:
            out.write("\n")
            break
        command, argument = parse_input(line)
        if command is None:
            continue
        if command == "cd":
            change_directory(argument, err)
        else:
            out.write(f"{UNKNOWN_MESSAGE}{command}\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the prompt on the standard streams."""
    return run_prompt()