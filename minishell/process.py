"""Starting programs and reporting on how they ended."""

from __future__ import annotations

import os
import subprocess
from typing import Iterable, List, Mapping, Optional, Sequence


def format_arguments(argv: Iterable[str]) -> List[str]:
    """Describe each command-line argument with its position."""
    return [f"Arguments {index}, {arg}" for index, arg in enumerate(argv)]


def _program_path(name: str) -> str:
    # A name without a slash is taken relative to the working directory,
    # never looked up along PATH.
    if os.sep in name or (os.altsep and os.altsep in name):
        return name
    return os.path.join(os.curdir, name)


def execute(
    args: Sequence[str], env: Optional[Mapping[str, str]] = None
) -> Optional[int]:
    """Run the program named by ``args[0]`` with *args* and wait for it.

    The program is not searched for along PATH. *env* replaces the
    environment; None passes on the current one. Returns the exit status
    (negative for a signal), or None when *args* is empty. Raises OSError
    when the program cannot be started.
    """
    if not args:
        return None
    program = _program_path(args[0])
    environment = None if env is None else dict(env)
    completed = subprocess.run(list(args), executable=program, env=environment)
    return completed.returncode


def describe_exit(pid: int, returncode: int) -> str:
    """Describe how child *pid* ended, given its exit status."""
    if returncode >= 0:
        return f"le processu enfant {pid} sorti avec le statut : {returncode}"
    return f"Le processu enfant {pid} n'est pas sorti normalement"