"""
Word list: the secret-word pool and the guess-validity universe.

A WordList is loaded once per game from a resource keyed by
(language, length) and never changes afterwards. Membership uses raw
identity (accent-sensitive, case-insensitive): a guess must match the
list's spelling to count as a valid play, even though winning only needs
a tolerant match against the secret word.

Usage:
    words = WordList.load(Language.PORTUGUESE, 7)
    secret = words.pick_random()
    Word("ABACAXI") in words
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional

from ..engine.word import Word
from ..errors import EmptyList
from .io import read_lines, resource_name

logger = logging.getLogger(__name__)


class WordList:
    """Immutable set of same-length Words."""

    def __init__(self, words: Iterable[Word], length: int, source: str = "<memory>"):
        self.length = int(length)
        self.source = source
        self._words: FrozenSet[Word] = frozenset(words)

    @classmethod
    def from_words(cls, words: Iterable[str], length: int, source: str = "<memory>") -> "WordList":
        """
        Build a list from raw strings, keeping only entries of `length` characters.
        """
        kept, skipped = [], 0
        for raw in words:
            w = raw.strip()
            if not w:
                continue
            if len(w) != length:
                skipped += 1
                continue
            kept.append(Word(w))
        if skipped:
            logger.warning("Skipped %d entries of the wrong length in %s", skipped, source)
        return cls(kept, length, source)

    @classmethod
    def load(cls, language, length: int, data_dir: Optional[Path | str] = None) -> "WordList":
        """
        Load the resource for (language, length).

        Raises:
          ResourceUnavailable if the file is missing or unreadable.
        """
        if data_dir is None:
            from ..game.settings import DATA_DIR
            data_dir = DATA_DIR
        path = Path(data_dir) / resource_name(language, length)
        logger.info("Loading word list from %s", path)
        wl = cls.from_words(read_lines(path), length, source=str(path))
        logger.info("Loaded %d words (length %d) from %s", len(wl), length, path)
        return wl

    def pick_random(self, rng: Optional[random.Random] = None) -> Word:
        """
        Uniformly draw one word.

        Raises:
          EmptyList if there is nothing to draw from.
        """
        if not self._words:
            raise EmptyList(f"no valid {self.length}-letter words in {self.source}")
        # Sort for a stable population so a seeded rng is reproducible
        pool = sorted(self._words)
        return (rng or random).choice(pool)

    def __contains__(self, candidate) -> bool:
        if not isinstance(candidate, Word):
            candidate = Word(str(candidate).strip())
        return candidate in self._words

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def keys(self) -> FrozenSet[str]:
        """Raw texts of every entry (for comparing loads)."""
        return frozenset(w.canonical_key() for w in self._words)

    def __repr__(self) -> str:
        return f"WordList(length={self.length}, size={len(self)}, source={self.source!r})"
