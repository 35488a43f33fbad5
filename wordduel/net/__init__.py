from .channel import GuessChannel
from .handshake import GameConfig, send_hello, receive_hello, send_config, receive_config

__all__ = ["GuessChannel", "GameConfig", "send_hello", "receive_hello", "send_config", "receive_config"]
