"""
Host and peer sessions over an already-connected socket.

The two sides are not symmetric:
  - the host owns the GameState. Its local player types on stdin; each line
    is relayed to the peer before evaluation. On the peer's turn the host
    waits on the channel for the peer's line.
  - the peer is a terminal. A background thread prints whatever the host
    relays while the main thread sends every line its user types.

Only the host evaluates guesses, so only the host sees feedback and
rejections. The game ends for the peer when the host closes the connection.
"""

from __future__ import annotations

import logging
import random
import socket
import threading
from pathlib import Path
from typing import Callable, Optional

from ..game.player import Player
from ..game.presentation import ConsolePresenter
from ..game.settings import Difficulty, Language
from ..game.state import GameState
from .channel import GuessChannel
from .handshake import GameConfig, receive_config, receive_hello, send_config, send_hello

logger = logging.getLogger(__name__)

LineSource = Callable[[], str]


def run_host(
        conn: socket.socket,
        host_name: str,
        *,
        difficulty: Difficulty = Difficulty.NORMAL,
        language: Language = Language.ENGLISH,
        data_dir: Path | str | None = None,
        rng: random.Random | None = None,
        timeout: Optional[float] = None,
        read_line: LineSource = input,
        presenter: ConsolePresenter | None = None,
) -> Player:
    """
    Play one game as host on `conn` and return the winner.

    Raises ConnectionAbortedError if the peer leaves mid-game.
    """
    presenter = presenter or ConsolePresenter(language)
    with GuessChannel(conn, timeout=timeout) as channel:
        second_name = receive_hello(channel)
        game = GameState(host_name, second_name, difficulty, language,
                         data_dir=data_dir, rng=rng, presenter=presenter)
        send_config(channel, GameConfig(host_name, second_name, language, difficulty,
                                        game.secret_word.render()))

        def next_guess(turn: bool) -> str:
            if turn:
                line = read_line()
                channel.send_local_input(line + "\n")
                return line
            line = channel.receive_remote_guess()
            presenter.show_message("opponent_guess", player=second_name, guess=line.strip().upper())
            return line

        return game.play(next_guess)


class RelayPrinter(threading.Thread):
    """Print every line the host relays until the connection closes."""

    def __init__(self, channel: GuessChannel, presenter: ConsolePresenter, host_name: str):
        threading.Thread.__init__(self, daemon=True)
        self.channel = channel
        self.presenter = presenter
        self.host_name = host_name
        self.closed = threading.Event()
        self.stopping = threading.Event()
        self.error: Optional[BaseException] = None

    def stop(self) -> None:
        """Unblock the relay when the local player leaves first."""
        self.stopping.set()
        try:
            self.channel.sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            # Already disconnected
            pass

    def run(self):
        try:
            while True:
                text = self.channel.receive_remote_guess()
                for line in text.splitlines():
                    if line.strip():
                        self.presenter.show_message("opponent_guess", player=self.host_name,
                                                    guess=line.strip().upper())
        except ConnectionAbortedError:
            if not self.stopping.is_set():
                self.presenter.show_message("connection_closed")
        except OSError as e:
            if self.stopping.is_set():
                logger.debug("Relay stopped after local exit: %s", e)
            else:
                logger.error("Relay stopped: %s", e)
                self.error = e
        finally:
            self.closed.set()


def run_peer(
        sock: socket.socket,
        name: str,
        *,
        read_line: LineSource = input,
        out=None,
) -> GameConfig:
    """
    Join a hosted game on `sock`: say hello, show the rules, then relay typed
    lines until the host closes the connection. Returns the received config.
    """
    with GuessChannel(sock) as channel:
        send_hello(channel, name)
        ConsolePresenter(Language.ENGLISH, out=out).show_message("waiting_for_host")
        config = receive_config(channel)

        presenter = ConsolePresenter(config.language, out=out)
        presenter.welcome(config.first_player, config.second_player, config.difficulty)

        relay = RelayPrinter(channel, presenter, config.first_player)
        relay.start()
        while not relay.closed.is_set():
            try:
                line = read_line()
            except EOFError:
                break
            if relay.closed.is_set():
                break
            channel.send_local_input(line + "\n")
        if not relay.closed.is_set():
            relay.stop()
        relay.join(timeout=1.0)
        if relay.error is not None:
            raise relay.error
        return config
