"""
Per-turn guess gates.

This module answers the question: "Is this guess acceptable right now?"
Gates run in a fixed order and the first failure wins:
  1) length:     character count must equal the secret word's
  2) repeat:     the word must not have been played by either player
                 (skipped when repeats are allowed, i.e. Hard difficulty)
  3) membership: the word must be in the word list, by raw identity

Each failing gate raises a GuessRejected subclass. The caller decides what
to record; see GameState.submit, which records the guess between gates 2 and 3.
"""

from __future__ import annotations

from typing import Container, Iterable

from ..errors import InvalidGuessLength, NotInList, RepeatedGuess
from .word import Word


def check_length(guess: Word, secret: Word) -> None:
    if guess.length() != secret.length():
        raise InvalidGuessLength(guess, f"{guess} has {guess.length()} letters, expected {secret.length()}")


def check_repeat(guess: Word, played: Iterable[Word]) -> None:
    # Raw identity: 'CAFE' and 'CAFÉ' are different plays
    if any(guess == w for w in played):
        raise RepeatedGuess(guess, f"{guess} was already played")


def check_membership(guess: Word, wordlist: Container[Word]) -> None:
    if guess not in wordlist:
        raise NotInList(guess, f"{guess} is not in the word list")
