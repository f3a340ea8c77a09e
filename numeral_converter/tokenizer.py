"""
Split raw text into word and separator tokens.

A word is a run of letters/digits, possibly joined by inner hyphens or
apostrophes ("twenty-five", "c'est"). Everything between two words is a
separator token, so joining all token texts gives back the input exactly:

    "Here, some phrase: hello!"
    -> ["Here", ", ", "some", " ", "phrase", ": ", "hello", "!"]
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_WORD = re.compile(r"[^\W_]+(?:['’\-][^\W_]+)*")


@dataclass(frozen=True)
class Token:
    """A slice of the source text."""

    text: str
    start: int
    end: int
    is_word: bool

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end


def tokenize(text: str) -> list[Token]:
    """Return the word and separator tokens of ``text`` in order."""
    tokens: list[Token] = []
    position = 0
    for match in _WORD.finditer(text):
        if match.start() > position:
            tokens.append(Token(text[position : match.start()], position, match.start(), False))
        tokens.append(Token(match.group(), match.start(), match.end(), True))
        position = match.end()
    if position < len(text):
        tokens.append(Token(text[position:], position, len(text), False))
    return tokens
