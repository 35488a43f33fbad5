from .settings import Difficulty, Language
from .player import Player
from .state import GameState, TurnResult
from .presentation import ConsolePresenter

__all__ = ["Difficulty", "Language", "Player", "GameState", "TurnResult", "ConsolePresenter"]
