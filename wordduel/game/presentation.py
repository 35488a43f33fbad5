"""
Console rendering for a game in progress.

The presenter is a passive observer: GameState calls it with what happened
and it writes localized, colored text. Nothing here changes game state.

Letter colors follow the feedback pattern from engine.scoring:
  'G' -> green, 'Y' -> yellow, '-' -> gray
"""

from __future__ import annotations

import sys
from typing import TextIO

from colorama import Fore, Style

from ..engine.scoring import score, GREEN, YELLOW
from ..engine.word import Word
from .messages import message, tries_text
from .settings import Difficulty, Language

DIFFICULTY_COLORS = {
    Difficulty.EASY: Fore.GREEN,
    Difficulty.NORMAL: Fore.YELLOW,
    Difficulty.HARD: Fore.RED,
}


class ConsolePresenter:
    def __init__(self, language: Language, out: TextIO | None = None, color: bool = True):
        self.language = language
        self.out = out or sys.stdout
        self.color = color

    # ---- helpers ----

    def _paint(self, text: str, fore: str) -> str:
        if not self.color:
            return text
        return f"{fore}{text}{Style.RESET_ALL}"

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, file=self.out, end=end, flush=True)

    def format_letter(self, letter: str, status: str) -> str:
        if status == GREEN:
            return self._paint(letter, Fore.LIGHTGREEN_EX)
        if status == YELLOW:
            return self._paint(letter, Fore.LIGHTYELLOW_EX)
        return self._paint(letter, Fore.LIGHTBLACK_EX)

    # ---- observer API ----

    def show_message(self, key: str, **params) -> None:
        self._print(message(self.language, key, **params))

    def welcome(self, first: str, second: str, difficulty: Difficulty) -> None:
        label = message(self.language, f"difficulty_{difficulty.value}")
        rule = "repeats_allowed" if difficulty.allows_repeats else "repeats_not_allowed"
        self.show_message(
            "welcome",
            difficulty=self._paint(label, DIFFICULTY_COLORS[difficulty]),
            players=message(self.language, "players", first=first, second=second),
            length=difficulty.word_length,
            repeat_rule=message(self.language, rule),
        )

    def announce_turn(self, round_number: int, player: str) -> None:
        self.show_message("turn", round=round_number, player=player)

    def show_status(self, guess: Word, secret: Word) -> str:
        """
        Print the guess with each letter colored by its feedback status.
        Returns the raw pattern (e.g. 'GY--G-Y').
        """
        pattern = score(guess, secret)
        letters = [self.format_letter(ch, st) for ch, st in zip(guess.render(), pattern)]
        self._print(" ".join(letters))
        return pattern

    def show_outcome(self, secret: Word, winner: str, rounds: int) -> None:
        self._print(self._paint(secret.render(), Fore.GREEN))
        self._print()
        self.show_message("won", player=winner, tries=tries_text(self.language, rounds))
