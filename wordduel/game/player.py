from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..engine.word import Word


@dataclass
class Player:
    name: str
    guessed_words: List[Word] = field(default_factory=list)

    def guess_word(self, word: Word) -> None:
        self.guessed_words.append(word)

    def has_guessed_word(self, word: Word) -> bool:
        # Raw identity, the same rule as word-list membership
        return word in self.guessed_words

    def __str__(self) -> str:
        return self.name
