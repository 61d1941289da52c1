"""Locating executables along PATH."""

from __future__ import annotations

import os
import stat
import sys
from typing import List, Mapping, Optional, TextIO

from minishell.environment import get_env, path_directories


def is_executable(path: str) -> bool:
    """Return True when *path* exists and its owner may execute it."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return bool(mode & stat.S_IXUSR)


def which_filename(
    filename: str,
    environ: Optional[Mapping[str, str]] = None,
    out: Optional[TextIO] = None,
) -> Optional[str]:
    """Search PATH for *filename*, reporting each candidate checked.

    The name PATH itself prints and returns the PATH value. Returns the
    full path found, or None. Raises KeyError when PATH is not set.
    """
    stream = sys.stdout if out is None else out
    if filename == "PATH":
        path = get_env("PATH", environ)
        if path is None:
            raise KeyError("PATH")
        stream.write(f"PATH={path}\n")
        return path

    for directory in path_directories(environ):
        full_path = f"{directory}/{filename}"
        stream.write(f"Checking: {full_path}\n")
        if is_executable(full_path):
            stream.write(f"{full_path}\n")
            return full_path

    stream.write(f"{filename} not found in PATH\n")
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Look up every command name given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write("Usage: which command1 [command2 ...]\n")
        return 1
    for name in args:
        try:
            which_filename(name)
        except KeyError:
            sys.stderr.write("PATH not found\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())