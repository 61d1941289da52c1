import io

import pytest

from minishell.lineio import (
    print_prompt,
    prompt_if_interactive,
    read_command,
    read_line,
    run_prompt,
)


class _TtyInput(io.StringIO):
    def isatty(self):
        return True


class _BrokenInput(io.StringIO):
    def readline(self, *args):
        raise OSError("read failed")


def test_read_line_returns_lines_then_none():
    stream = io.StringIO("ls -l\nsecond\n")
    assert read_line(stream) == "ls -l\n"
    assert read_line(stream) == "second\n"
    assert read_line(stream) is None


def test_read_line_last_line_without_newline():
    stream = io.StringIO("abc")
    assert read_line(stream) == "abc"
    assert read_line(stream) is None


def test_read_command_strips_newline():
    assert read_command(io.StringIO("ls -l /tmp\nnext\n")) == "ls -l /tmp"


def test_read_command_empty_line():
    assert read_command(io.StringIO("\n")) == ""


def test_read_command_raises_at_eof():
    with pytest.raises(EOFError):
        read_command(io.StringIO(""))


def test_print_prompt_writes_dollar():
    out = io.StringIO()
    print_prompt(out)
    assert out.getvalue() == "$ "


def test_prompt_not_shown_when_not_a_terminal():
    out = io.StringIO()
    assert prompt_if_interactive(io.StringIO(""), out) is False
    assert out.getvalue() == ""


def test_prompt_shown_on_terminal():
    out = io.StringIO()
    assert prompt_if_interactive(_TtyInput(""), out) is True
    assert out.getvalue() == "$ "


def test_run_prompt_echoes_until_eof():
    out = io.StringIO()
    run_prompt(io.StringIO("hello\n"), out)
    assert out.getvalue() == "$ hello\n\n$ \nFin de fichier atteinte (Ctrl+D).\n"


def test_run_prompt_reports_read_error():
    out = io.StringIO()
    run_prompt(_BrokenInput(""), out)
    assert out.getvalue() == "$ Erreur de lecture ou fin de fichier\n"