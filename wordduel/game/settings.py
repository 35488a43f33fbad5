"""
Game configuration constants.

All tunables live here so the CLI, the game loop and the network layer
share one source of truth.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final


class Difficulty(Enum):
    """Difficulty picks the secret word's length and whether repeats are allowed."""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def word_length(self) -> int:
        return WORD_LENGTHS[self]

    @property
    def allows_repeats(self) -> bool:
        return self is Difficulty.HARD


class Language(Enum):
    ENGLISH = "english"
    PORTUGUESE = "portuguese"


WORD_LENGTHS: Final = {
    Difficulty.EASY: 6,
    Difficulty.NORMAL: 7,
    Difficulty.HARD: 8,
}

# Shipped word lists: wordlist_<language>_<length>.txt
DATA_DIR: Final[Path] = Path(__file__).resolve().parent.parent / "datasets" / "data"

# Network defaults
DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[int] = 6000

# Remote read loop: sleep between polls of a non-blocking socket, and recv size
POLL_INTERVAL: Final[float] = 0.1
RECV_BUFSIZE: Final[int] = 1024
