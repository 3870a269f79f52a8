"""The shell's built-in commands: cd, echo, pwd, env, export and unset."""

from __future__ import annotations

import os
import re
import sys
from typing import Sequence, TextIO

from jshell.diagnostics import report_error
from jshell.environment import Environment

_NO_NEWLINE_FLAG = re.compile(r"-n+")


def _env(environment: Environment | None) -> Environment:
    return Environment() if environment is None else environment


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: TextIO | None) -> TextIO:
    return sys.stderr if stream is None else stream


def home_directory(environment: Environment | None = None) -> str | None:
    """The value of HOME, or None when it is not set."""
    return _env(environment).get("HOME")


def run_cd(
    args: Sequence[str],
    environment: Environment | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Change directory to the argument, or to HOME without one."""
    if len(args) < 2:
        home = home_directory(environment)
        if home is None:
            report_error("cd:root", FileNotFoundError(2, "HOME not set"), _err(err))
            return 1
        try:
            os.chdir(home)
        except OSError as error:
            report_error("cd:root", error, _err(err))
            return 1
        return 0
    if len(args) > 2:
        _out(out).write("cd: too many arguments\n")
        return 1
    try:
        os.chdir(args[1])
    except OSError as error:
        report_error("cd", error, _err(err))
        return 1
    return 0


def echo_text(args: Sequence[str]) -> str:
    """What echo prints: leading ``-n``, ``-nn``... flags drop the newline."""
    words = list(args[1:])
    flags = 0
    while flags < len(words) and _NO_NEWLINE_FLAG.fullmatch(words[flags]):
        flags += 1
    text = " ".join(words[flags:])
    return text if flags else text + "\n"


def run_echo(args: Sequence[str], out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces."""
    _out(out).write(echo_text(args))
    return 0


def run_pwd(out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as error:
        report_error("pwd", error, _err(err))
        return 1
    _out(out).write(cwd + "\n")
    return 0


def run_env(environment: Environment | None = None, out: TextIO | None = None) -> int:
    """Print every environment entry in order."""
    stream = _out(out)
    for entry in _env(environment).entries():
        stream.write(entry + "\n")
    return 0


def run_export(
    args: Sequence[str],
    environment: Environment | None = None,
    out: TextIO | None = None,
) -> int:
    """Define variables, or list them sorted when given none."""
    env = _env(environment)
    if len(args) < 2:
        stream = _out(out)
        for entry in env.sorted_entries():
            stream.write(entry + "\n")
        return 0
    for assignment in args[1:]:
        env.export(assignment)
    return 0


def run_unset(
    args: Sequence[str],
    environment: Environment | None = None,
    out: TextIO | None = None,
) -> int:
    """Remove the named variables."""
    if len(args) < 2:
        _out(out).write("unset: not enough arguments\n")
        return 1
    env = _env(environment)
    for name in args[1:]:
        env.unset(name)
    return 0