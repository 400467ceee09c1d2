"""
Core module of Classic Pong
"""

from classic_pong.core.entities import BallState
from classic_pong.core.entities import MatchPhase
from classic_pong.core.entities import MatchState
from classic_pong.core.entities import PaddleIntent
from classic_pong.core.entities import PaddleState
from classic_pong.core.entities import Scores
from classic_pong.core.entities import Side

__all__ = [
    "BallState",
    "MatchPhase",
    "MatchState",
    "PaddleIntent",
    "PaddleState",
    "Scores",
    "Side",
]
