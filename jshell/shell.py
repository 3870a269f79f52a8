"""The interactive shell: reading lines, running built-ins and launching programs."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Sequence, TextIO

from jshell.builtins import (
    run_cd,
    run_echo,
    run_env,
    run_export,
    run_pwd,
    run_unset,
)
from jshell.diagnostics import report_error
from jshell.environment import Environment
from jshell.heredoc import HEREDOC_NAME, HeredocSyntaxError, find_heredoc, get_delimiter, read_heredoc
from jshell.tokenizer import candidate_paths, split_words

try:
    import readline as _readline
except ImportError:  # pragma: no cover - platform without readline
    _readline = None

PROMPT = "minishell>>> "
END_OF_INPUT_MESSAGE = "pas de ligne"


def find_slash(args: Sequence[str]) -> int | None:
    """Position of ``/`` within the first word that holds one, or None."""
    for word in args:
        position = word.find("/")
        if position >= 0:
            return position
    return None


def find_executable(command: str, environment: Environment | None = None) -> str | None:
    """Path of the program ``command`` would run, or None if none is found.

    A command holding ``/`` names its program directly; otherwise each
    directory of PATH is searched in order.
    """
    if "/" in command:
        return command
    env = Environment() if environment is None else environment
    path_list = env.get("PATH")
    if path_list is None:
        return None
    for candidate in candidate_paths(path_list, command):
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


def _fileno_or(stream: TextIO, fallback: int) -> TextIO | int:
    """The stream itself when it has a real descriptor, else ``fallback``."""
    try:
        stream.fileno()
    except (AttributeError, OSError, ValueError):
        return fallback
    stream.flush()
    return stream


class Shell:
    """A small command interpreter with built-ins and program launching."""

    def __init__(
        self,
        environment: Environment | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.environment = Environment() if environment is None else environment
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        self.heredoc_path = HEREDOC_NAME
        self.history: list[str] = []

    def _heredoc(self, args: Sequence[str], index: int) -> None:
        try:
            delimiter: str | None = get_delimiter(args, index)
        except HeredocSyntaxError as error:
            self.stderr.write(f"{error}\n")
            delimiter = None
        read_heredoc(delimiter, self.stdin, self.stdout, self.heredoc_path)
        try:
            with open(self.heredoc_path, "rb"):
                pass
        except OSError as error:
            report_error("open", error, self.stderr)

    def execute(self, args: Sequence[str]) -> bool:
        """Run one command; False means the shell should stop."""
        index = find_heredoc(args)
        if index is not None:
            self._heredoc(args, index)
            return True
        if not args:
            return True
        name = args[0]
        if name == "exit":
            return False
        if name == "cd":
            run_cd(args, self.environment, self.stdout, self.stderr)
        elif name == "echo":
            run_echo(args, self.stdout)
        elif name == "pwd":
            run_pwd(self.stdout, self.stderr)
        elif name == "env":
            run_env(self.environment, self.stdout)
        elif name == "export":
            run_export(args, self.environment, self.stdout)
        elif name == "unset":
            run_unset(args, self.environment, self.stdout)
        else:
            return self.launch(args)
        return True

    def launch(self, args: Sequence[str]) -> bool:
        """Run an external program and wait for it to finish."""
        stdout = _fileno_or(self.stdout, subprocess.PIPE)
        stderr = _fileno_or(self.stderr, subprocess.PIPE)
        stdin = _fileno_or(self.stdin, subprocess.DEVNULL)
        try:
            completed = subprocess.run(
                list(args),
                stdin=stdin,
                stdout=stdout,
                stderr=stderr,
                env=self.environment.as_dict(),
                check=False,
            )
        except OSError as error:
            report_error("jsh", error, self.stderr)
            return True
        if completed.stdout:
            self.stdout.write(completed.stdout.decode(errors="replace"))
        if completed.stderr:
            self.stderr.write(completed.stderr.decode(errors="replace"))
        return True

    def run_command(self, line: str) -> bool:
        """Split ``line`` into words and execute them."""
        return self.execute(split_words(line))

    def _interactive(self) -> bool:
        try:
            return (
                self.stdin is sys.stdin
                and self.stdout is sys.stdout
                and self.stdin.isatty()
            )
        except (AttributeError, ValueError):
            return False

    def _read_line(self) -> str | None:
        if self._interactive():
            try:
                return input(PROMPT)
            except EOFError:
                return None
        self.stdout.write(PROMPT)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line

    def run(self) -> None:
        """Prompt for and execute commands until ``exit`` or end of input."""
        running = True
        while running:
            line = self._read_line()
            if line is None:
                self.stdout.write(END_OF_INPUT_MESSAGE + "\n")
                break
            if line:
                self.history.append(line)
                if _readline is not None and self._interactive():
                    _readline.add_history(line)
            running = self.run_command(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell; ``-c COMMAND`` runs a single command instead."""
    args = list(sys.argv[1:] if argv is None else argv)
    shell = Shell()
    if len(args) == 2 and args[0] == "-c":
        shell.run_command(args[1])
    else:
        shell.run()
    return 0