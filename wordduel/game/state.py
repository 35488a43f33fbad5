"""
Turn-based game state machine.

States:
  AwaitingGuess(turn) -> Evaluating -> AwaitingGuess(not turn) | GameOver

Per submitted guess (see `submit`):
  1) normalize into a Word
  2) length gate     - reject, same player again, nothing recorded
  3) repeat gate     - skipped on Hard; reject, same player again, nothing recorded
  -- from here on the guess is recorded into the active player's history --
  4) membership gate - reject, same player again
  5) match           - tolerant match with the secret ends the game;
                       otherwise show letter feedback and pass the turn

`round` starts at 1 and grows each time the turn returns to the first
player. Only the host runs this machine; the remote peer only relays text.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ..datasets.wordlist import WordList
from ..engine.validation import check_length, check_membership, check_repeat
from ..engine.word import Word
from ..errors import GuessRejected, NotInList
from .messages import message
from .player import Player
from .presentation import ConsolePresenter
from .settings import Difficulty, Language

logger = logging.getLogger(__name__)

# next_guess(first_player_turn) -> raw line typed by the active player
GuessSource = Callable[[bool], str]


@dataclass
class TurnResult:
    """Outcome of a single `submit` call."""
    guess: Word
    player: str
    accepted: bool
    reason: Optional[str] = None   # message id when rejected
    pattern: Optional[str] = None  # letter feedback when accepted and not winning
    game_over: bool = False


class GameState:
    def __init__(
            self,
            first_player_name: str,
            second_player_name: str,
            difficulty: Difficulty = Difficulty.NORMAL,
            language: Language = Language.ENGLISH,
            *,
            wordlist: WordList | None = None,
            data_dir: Path | str | None = None,
            rng: random.Random | None = None,
            presenter: ConsolePresenter | None = None,
    ):
        self.first_player = Player(first_player_name)
        self.second_player = Player(second_player_name)
        self.difficulty = difficulty
        self.language = language
        self.round = 1
        self.turn = True
        self.wordlist = wordlist if wordlist is not None else WordList.load(
            language, difficulty.word_length, data_dir)
        self.secret_word = self.wordlist.pick_random(rng)
        self.presenter = presenter or ConsolePresenter(language)
        self.winner: Player | None = None
        logger.info("New game: %s vs %s, %s/%s, %d words",
                    first_player_name, second_player_name,
                    difficulty.value, language.value, len(self.wordlist))

    @property
    def active_player(self) -> Player:
        return self.first_player if self.turn else self.second_player

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def show_welcome(self) -> None:
        self.presenter.welcome(self.first_player.name, self.second_player.name, self.difficulty)

    def announce_player_turn(self) -> None:
        self.presenter.announce_turn(self.round, self.active_player.name)

    def submit(self, raw: str) -> TurnResult:
        """
        Evaluate one guess from the active player.

        Rejections are rendered and returned, never raised; the turn does not
        change. Anything other than GuessRejected propagates.
        """
        if self.is_over:
            raise RuntimeError("game is already over")

        player = self.active_player
        guess = Word(raw.rstrip())

        try:
            check_length(guess, self.secret_word)
            if not self.difficulty.allows_repeats:
                check_repeat(guess, self.first_player.guessed_words + self.second_player.guessed_words)
        except GuessRejected as e:
            return self._reject(guess, player, e)

        # Passed length and repeat gates: recorded even if not in the list
        player.guess_word(guess)

        try:
            check_membership(guess, self.wordlist)
        except NotInList as e:
            return self._reject(guess, player, e)

        if guess.matches(self.secret_word):
            self.end_game()
            return TurnResult(guess, player.name, True, game_over=True)

        pattern = None
        for word in self.wordlist:
            if word == guess:
                pattern = self.presenter.show_status(word, self.secret_word)

        self.next_play()
        return TurnResult(guess, player.name, True, pattern=pattern)

    def _reject(self, guess: Word, player: Player, err: GuessRejected) -> TurnResult:
        logger.debug("Rejected %s from %s: %s", guess, player, err.message_id)
        self.presenter.show_message(err.message_id, guess=guess.render(),
                                    length=self.secret_word.length())
        return TurnResult(guess, player.name, False, reason=err.message_id)

    def next_play(self) -> None:
        self.turn = not self.turn
        if self.turn:
            self.round += 1
        logger.debug("Turn passes to %s (round %d)", self.active_player, self.round)

    def end_game(self) -> None:
        self.winner = self.active_player
        logger.info("%s won after %d round(s)", self.winner, self.round)
        self.presenter.show_outcome(self.secret_word, self.winner.name, self.round)

    def play(self, next_guess: GuessSource) -> Player:
        """
        Run the turn loop until someone wins.

        `next_guess(turn)` must block until the active player has a line
        (local input when `turn` is True, the remote peer otherwise).
        Connection errors raised by it end the game and propagate.
        """
        self.show_welcome()
        while not self.is_over:
            self.announce_player_turn()
            self.submit(next_guess(self.turn))
        return self.winner

    def __str__(self) -> str:
        return message(self.language, "players", first=self.first_player, second=self.second_player)
