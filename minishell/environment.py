"""Access to environment variables and the PATH search list."""

from __future__ import annotations

import os
import sys
from typing import Iterator, List, Mapping, Optional, TextIO


def _resolve(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def get_env(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the value of variable *name*, or None when it is unset."""
    return _resolve(environ).get(name)


def environ_lines(environ: Optional[Mapping[str, str]] = None) -> Iterator[str]:
    """Yield every variable as a NAME=value string."""
    for name, value in _resolve(environ).items():
        yield f"{name}={value}"


def path_directories(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the non-empty directories listed in PATH.

    Raises KeyError when PATH is not set.
    """
    path = get_env("PATH", environ)
    if path is None:
        raise KeyError("PATH")
    return [directory for directory in path.split(":") if directory]


def print_path_directories(
    environ: Optional[Mapping[str, str]] = None, out: Optional[TextIO] = None
) -> None:
    """Write each PATH directory on its own line."""
    stream = sys.stdout if out is None else out
    try:
        directories = path_directories(environ)
    except KeyError:
        sys.stderr.write("PATH variable not found\n")
        return
    for directory in directories:
        stream.write(f"{directory}\n")