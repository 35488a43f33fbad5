"""
Game-start exchange between the host and the remote peer.

Message types (one JSON object per line, UTF-8):
  - hello:  { type: 'hello', name: str }                       peer -> host
  - config: { type: 'config', first_player: str, second_player: str,
              language: 'english'|'portuguese',
              difficulty: 'easy'|'normal'|'hard',
              secret_word: str }                              host -> peer

Both are sent exactly once, before any guess. The format is private to
this program; it is not meant for third-party clients.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Dict

from ..errors import HandshakeError
from ..game.settings import Difficulty, Language
from .channel import GuessChannel

logger = logging.getLogger(__name__)

PROTO_VERSION = 1


@dataclass(frozen=True)
class GameConfig:
    first_player: str
    second_player: str
    language: Language
    difficulty: Difficulty
    secret_word: str

    def to_record(self) -> Dict:
        return {
            "type": "config",
            "proto": PROTO_VERSION,
            "first_player": self.first_player,
            "second_player": self.second_player,
            "language": self.language.value,
            "difficulty": self.difficulty.value,
            "secret_word": self.secret_word,
        }

    @classmethod
    def from_record(cls, rec: Dict) -> "GameConfig":
        try:
            return cls(
                first_player=str(rec["first_player"]),
                second_player=str(rec["second_player"]),
                language=Language(rec["language"]),
                difficulty=Difficulty(rec["difficulty"]),
                secret_word=str(rec["secret_word"]),
            )
        except (KeyError, ValueError) as e:
            raise HandshakeError(f"bad config record: {e}") from e


def _send_record(channel: GuessChannel, rec: Dict) -> None:
    channel.send_line(json.dumps(rec, ensure_ascii=False))


def _receive_record(channel: GuessChannel, expected_type: str) -> Dict:
    try:
        line = channel.receive_line()
    except UnicodeDecodeError as e:
        raise HandshakeError(f"{expected_type} record is not valid UTF-8") from e
    try:
        rec = json.loads(line)
    except json.JSONDecodeError as e:
        raise HandshakeError(f"invalid {expected_type} record: {line!r}") from e
    if not isinstance(rec, dict) or rec.get("type") != expected_type:
        raise HandshakeError(f"expected {expected_type!r} record, got {line!r}")
    return rec


def send_hello(channel: GuessChannel, name: str) -> None:
    _send_record(channel, {"type": "hello", "proto": PROTO_VERSION, "name": name})


def receive_hello(channel: GuessChannel) -> str:
    rec = _receive_record(channel, "hello")
    name = str(rec.get("name") or "").strip()
    if not name:
        raise HandshakeError("hello record without a player name")
    logger.info("Player connected - %s", name)
    return name


def send_config(channel: GuessChannel, config: GameConfig) -> None:
    _send_record(channel, config.to_record())


def receive_config(channel: GuessChannel) -> GameConfig:
    config = GameConfig.from_record(_receive_record(channel, "config"))
    logger.info("Game config received: %s vs %s (%s, %s)",
                config.first_player, config.second_player,
                config.language.value, config.difficulty.value)
    return config
