"""Splitting command lines into words."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

DELIMITER = " "


def split_command(line: str) -> List[str]:
    """Split *line* on spaces, dropping empty fields."""
    return [token for token in line.split(DELIMITER) if token]


def split_string(text: str, out: Optional[TextIO] = None) -> List[str]:
    """Split *text* into words, reporting the input and each word found."""
    stream = sys.stdout if out is None else out
    stream.write(f"Chaîne d'entrée: {text}\n")
    words = split_command(text)
    for word in words:
        stream.write(f"Mot trouvé: {word}\n")
    return words