"""
Error taxonomy for wordduel.

Fatal at game construction:
  - ResourceUnavailable: the word-list resource is missing or unreadable.
  - EmptyList:           the resource holds zero valid entries.

Recoverable, per turn (the same player is prompted again):
  - InvalidGuessLength, RepeatedGuess, NotInList

Bad game-start records raise HandshakeError (fatal).

A clean close of the remote connection is reported with the built-in
ConnectionAbortedError; other socket errors propagate as OSError.
"""

from __future__ import annotations


class WordDuelError(Exception):
    """Base class for every error raised by this package."""


class ResourceUnavailable(WordDuelError, FileNotFoundError):
    pass


class EmptyList(WordDuelError, ValueError):
    pass


class GuessRejected(WordDuelError, ValueError):
    """
    A guess failed one of the per-turn gates.

    `message_id` names the catalog entry used to explain the rejection.
    """
    message_id = "invalid_guess"

    def __init__(self, guess, detail: str = ""):
        self.guess = guess
        super().__init__(detail or f"{guess} rejected ({self.message_id})")


class InvalidGuessLength(GuessRejected):
    message_id = "invalid_length"


class RepeatedGuess(GuessRejected):
    message_id = "repeat_not_allowed"


class NotInList(GuessRejected):
    message_id = "not_in_list"


class HandshakeError(WordDuelError, ValueError):
    """The game-start exchange received something that is not a valid record."""
