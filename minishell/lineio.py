"""Prompt display and line reading for the interactive shell."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

PROMPT = "$ "
EOF_MESSAGE = "\nFin de fichier atteinte (Ctrl+D).\n"
READ_ERROR_MESSAGE = "Erreur de lecture ou fin de fichier\n"


def read_line(stream: TextIO) -> Optional[str]:
    """Read one line from *stream*, newline included.

    Returns None when the end of input is reached before anything is read.
    """
    line = stream.readline()
    if line == "":
        return None
    return line


def read_command(stream: TextIO) -> str:
    """Read a command line and cut it at its first newline.

    Raises EOFError when no more input is available.
    """
    line = read_line(stream)
    if line is None:
        raise EOFError("getline: end of input")
    command, _, _ = line.partition("\n")
    return command


def print_prompt(stream: Optional[TextIO] = None) -> None:
    """Write the shell prompt to *stream* (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(PROMPT)
    out.flush()


def prompt_if_interactive(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> bool:
    """Show the prompt only when *stdin* is a terminal; report whether it was shown."""
    source = sys.stdin if stdin is None else stdin
    if not source.isatty():
        return False
    print_prompt(stdout)
    return True


def run_prompt(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Prompt repeatedly, echoing every line read until input ends."""
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    while True:
        print_prompt(out)
        try:
            line = read_line(source)
        except OSError:
            out.write(READ_ERROR_MESSAGE)
            break
        if line is None:
            out.write(EOF_MESSAGE)
            break
        out.write(f"{line}\n")
    out.flush()