"""A minimal interactive shell that runs programs by path."""

from __future__ import annotations

import os
import sys
from typing import List, Mapping, Optional, Sequence, TextIO

from minishell.lineio import print_prompt, read_command
from minishell.process import execute
from minishell.tokens import split_command

PPID_COMMAND = "./ppid"


class Shell:
    """Read commands, split them on spaces and run them one at a time."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.env = dict(os.environ if env is None else env)

    def run(self) -> int:
        """Run until input ends; returns the failure status the shell exits with."""
        while True:
            print_prompt(self.stdout)
            try:
                line = read_command(self.stdin)
            except EOFError as exc:
                sys.stderr.write(f"{exc}\n")
                return 1
            if not line:
                continue
            self.execute(split_command(line))

    def execute(self, args: Sequence[str]) -> Optional[int]:
        """Run one command and return its exit status, or None for no command."""
        if not args:
            return None
        if args[0] == PPID_COMMAND:
            self.stdout.write(f"{os.getpid()}\n")
            self.stdout.flush()
            return 0
        self.stdout.flush()
        try:
            return execute(args, self.env)
        except OSError as exc:
            sys.stderr.write(f"execve: {exc.strerror or exc}\n")
            return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Start the shell on the standard streams."""
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())