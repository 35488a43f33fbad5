"""
Word value used for guesses, secret words and word-list entries.

Two notions of "same word" live side by side:
  - raw identity (`canonical_key`, `==`, `hash`): the upper-cased text,
    accent-sensitive. Used for list membership and guess history.
  - tolerant match (`matches`): accent-insensitive, length-gated. Used for
    gameplay (win detection and per-letter feedback).

Examples:
  Word("café") == Word("CAFÉ")        -> True
  Word("cafe") == Word("café")        -> False
  Word("cafe").matches(Word("café"))  -> True
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Accented vowels and cedilla folded to their base Latin letter (case kept).
_FOLD_FROM = "áàâãéèêíìîóòôõúùûüçÁÀÂÃÉÈÊÍÌÎÓÒÔÕÚÙÛÜÇ"
_FOLD_TO = "aaaaeeeiiioooouuuucAAAAEEEIIIOOOOUUUUC"
_FOLD_TABLE = str.maketrans(_FOLD_FROM, _FOLD_TO)


def fold_char(c: str) -> str:
    """Map one character to its diacritic-free form ('Ã' -> 'A', 'ç' -> 'c')."""
    return c.translate(_FOLD_TABLE)


def fold(text: str) -> str:
    return text.translate(_FOLD_TABLE)


@dataclass(frozen=True, order=True)
class Word:
    text: str = field(default="")

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "text", self.text.upper())

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def length(self) -> int:
        """Character count (an accented letter counts once)."""
        return len(self.text)

    def canonical_key(self) -> str:
        return self.text

    def render(self) -> str:
        return self.text

    def matches(self, other: "Word") -> bool:
        """
        Accent-insensitive comparison used for gameplay.

        Words of different character counts never match.
        """
        if len(self.text) != len(other.text):
            return False
        return all(fold_char(a) == fold_char(b) for a, b in zip(self.text, other.text))
