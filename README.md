# jshell

A small interactive command shell. It reads a line and splits it on
whitespace. It then runs a builtin, or starts the named program and waits
for it to finish.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## The shell

Start the shell with the `jshell` command. The prompt is `minishell>>> `.

    jshell

To run a single command line instead of reading from the terminal, pass `-c`:

    jshell -c "echo hello"

The shell stops on `exit`. At end of input it prints `pas de ligne` and stops.
When it runs on a terminal, non-empty lines are added to the readline history.

Builtins:

- `cd [dir]` changes directory. With no argument it goes to `$HOME`. With
  more than one argument it prints `cd: too many arguments`.
- `echo [-n...] words...` prints the words, separated by spaces. Leading
  options made of `-n`, such as `-n` or `-nnn`, leave off the trailing
  newline.
- `pwd` prints the working directory.
- `env` prints the environment, one `NAME=value` per line, in order.
- `export [NAME[=value]...]` sets variables. With no argument it prints the
  environment in sorted order. A name given without `=` that is not yet
  defined is stored as `NAME=''`.
- `unset NAME...` removes variables. With no argument it prints
  `unset: not enough arguments`.
- `exit` leaves the shell.

Any other word is run as a program. It gets the shell's environment, and the
system looks it up on `PATH`.

A word that starts with `<<` opens a heredoc. The delimiter is the rest of
the word (`<<END`), or the next word after a bare `<<` (`<< END`). The shell
shows the `heredoc> ` prompt and reads lines until the delimiter or end of
input. It writes the lines, with their newlines removed, to
`/tmp/.minishell_heredoc_`.

## What the shell does not do

- It has no pipes (`|`), no command sequencing (`;`) and no file redirections.
- It does not expand variables or process quotes.
- The text collected by a heredoc is only saved to its file. It is not passed
  to any command, and the rest of the line is not run.

## Other commands

- `jshell-cd` is a minimal prompt, `minishell> `. It understands `cd [dir]`
  and prints `Command not recognized: NAME` for anything else.
- `jshell-signals` blocks SIGQUIT and checks once a second whether SIGINT has
  arrived. After SIGINT arrives, it unblocks SIGQUIT.
- `jshell-check-file [path]` tries to open a file, `the missing file` by
  default. If the open fails, it prints `open: <system message>` and exits
  with status 1.

## As a library

    from jshell.environment import Environment
    from jshell.shell import Shell

    env = Environment(["HOME=/tmp", "PATH=/usr/bin:/bin"])
    shell = Shell(env)
    shell.run_command("export GREETING=hello")
    print(env.get("GREETING"))

Modules:

- `jshell.shell`: `Shell` (with `execute`, `launch`, `run_command` and `run`),
  plus `find_executable` and `find_slash`.
- `jshell.builtins`: the builtins as functions, `run_cd`, `run_echo`,
  `run_pwd`, `run_env`, `run_export` and `run_unset`, plus `echo_text` and
  `home_directory`.
- `jshell.environment`: `Environment`, an ordered list of `NAME=value`
  entries.
- `jshell.heredoc`: `find_heredoc`, `get_delimiter` and `read_heredoc`.
  `get_delimiter` raises `HeredocSyntaxError` when there is no delimiter.
- `jshell.tokenizer`: `split_words`, `count_words` and `candidate_paths`.
- `jshell.diagnostics`: `describe_error`, `report_error` and `check_file`.
- `jshell.signals`: `SigintLatch`, `block_signal` and `unblock_signal`.
- `jshell.cdshell`: `change_directory`, `parse_input` and `run_prompt`.
- `jshell.chars`: character classification and case conversion, plus `atoi`
  and `itoa`.
- `jshell.strtools`: string search, slicing, trimming, splitting and
  comparison.
- `jshell.memory`: byte-buffer helpers (`memset`, `memcpy`, `memmove` and
  others).
- `jshell.linked`: a singly linked list, `LinkedList` with `Node`.
- `jshell.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`.