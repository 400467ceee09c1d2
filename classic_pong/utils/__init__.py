"""
Classic Pong utilities
"""

from classic_pong.utils.config import Difficulty
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import GameMode
from classic_pong.utils.config import MatchSettings
from classic_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig", "MatchSettings", "Difficulty", "GameMode"]
