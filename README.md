# minishell

A deliberately small command shell, plus a few helpers for working with
processes, the environment and `PATH`.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The shell

```
minishell
```

The shell prints a `$ ` prompt, reads one line, splits it on spaces (empty
words are dropped) and runs the first word as a program, passing all the
words as its arguments. The program name is taken as given: there is no
`PATH` lookup, and a name without a slash is run from the current directory.
Write `/bin/ls -l /tmp` rather than `ls -l /tmp`. The environment the shell
started with is passed on to each program.

An empty line just prompts again. The shell waits for each command to finish
before it prompts again. If a program cannot be started, an `execve: ...`
message is written to standard error and the shell carries on.

The command `./ppid` is answered by the shell itself, which prints the ID of
the shell's own process.

At end of input the shell writes a message to standard error and exits with
status 1.

The shell is also available from Python:

```python
import sys
from minishell.shell import Shell

Shell(sys.stdin, sys.stdout, env={}).run()
```

`Shell.execute(args)` runs a single, already split command and returns its
exit status (negative when the program was killed by a signal), or `None`
when `args` is empty.

## Finding programs on PATH

```
minishell-which ls cat
```

For every name given, each directory on `PATH` is checked in order; every
candidate is reported as `Checking: <path>`, and the first file its owner may
execute is printed. A name found nowhere is reported as not found. The special
name `PATH` prints the search path itself. With no names, a usage message is
written to standard error and the command exits with status 1.

## Library helpers

- `minishell.lineio`: `read_line`, `read_command`, `print_prompt`,
  `prompt_if_interactive` and `run_prompt` for reading input line by line.
  `read_command` raises `EOFError` at end of input.
- `minishell.tokens`: `split_command` splits a line into words on spaces;
  `split_string` does the same while reporting the input and each word.
- `minishell.environment`: `get_env`, `environ_lines`, `path_directories` and
  `print_path_directories` for looking at an environment mapping (the
  process environment by default). `path_directories` raises `KeyError` when
  `PATH` is not set.
- `minishell.which`: `is_executable` and `which_filename` for searching `PATH`.
- `minishell.process`: `format_arguments`, `execute` and `describe_exit` for
  running a program and reporting how it ended.

## What it does not do

This is not a general-purpose shell. It has no `PATH` search when running
commands, no built-in commands other than `./ppid` (not even `exit` or `cd`),
and no quoting, variables, globbing, pipes, redirection or job control.