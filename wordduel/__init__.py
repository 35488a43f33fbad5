"""wordduel: a two-player, turn-based word-guessing game over a direct TCP connection."""

__version__ = "0.1.0"
