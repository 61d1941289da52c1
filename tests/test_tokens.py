import io

from minishell.tokens import split_command, split_string

SAMPLE = (
    "Hello world, how are you today? aujourd'hui je vais très bien ce  matin."
    " j'ai hate à demain soir."
)


def test_split_command_basic():
    assert split_command("ls -l /tmp") == ["ls", "-l", "/tmp"]


def test_split_command_collapses_repeated_spaces():
    assert split_command("  ls   -l  ") == ["ls", "-l"]


def test_split_command_empty_line():
    assert split_command("") == []
    assert split_command("     ") == []


def test_split_command_only_splits_on_spaces():
    assert split_command("a\tb c") == ["a\tb", "c"]


def test_split_string_reports_words():
    out = io.StringIO()
    words = split_string(SAMPLE, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == f"Chaîne d'entrée: {SAMPLE}"
    assert lines[1:] == [f"Mot trouvé: {word}" for word in words]


def test_split_string_words_rejoin_to_input():
    words = split_string(SAMPLE, io.StringIO())
    assert " ".join(words) == " ".join(SAMPLE.split())
    assert "ce" in words and "matin." in words
    assert all(word for word in words)