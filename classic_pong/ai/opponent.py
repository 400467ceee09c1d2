"""
Computer opponent for Classic Pong
"""

from typing import Any

import numpy as np

from classic_pong.core.entities import MatchState
from classic_pong.core.entities import Side
from classic_pong.utils.config import game_config


class OpponentController:
    """
    Drives one paddle by following the ball.

    The paddle only reacts once the ball is heading its way and has crossed
    the middle of the field. Each such tick it reacts with probability
    ``difficulty``, which models reaction latency: an easy opponent updates
    its velocity rarely, a hard one almost every tick.
    """

    def __init__(
        self,
        side: Side = Side.RIGHT,
        difficulty: float = 0.1,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ):
        """
        Args:
            side: Paddle controlled by the computer
            difficulty: Reaction probability in [0, 1]
            rng: Random generator for the reaction draw
            seed: Seed used when no generator is given
        """
        if not 0.0 <= difficulty <= 1.0:
            raise ValueError(f"difficulty must be within [0, 1], got {difficulty}")
        self.side = side
        self.difficulty = difficulty
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @classmethod
    def for_state(cls, state: MatchState, **kwargs: Any) -> "OpponentController":
        return cls(side=state.ai_side, difficulty=state.difficulty, **kwargs)

    def sees_ball(self, state: MatchState) -> bool:
        """True while the ball is moving toward this paddle, past the midline"""
        ball = state.ball
        midline = state.field_width / 2
        if self.side is Side.RIGHT:
            return ball.vx > 0 and ball.x > midline
        return ball.vx < 0 and ball.x < midline

    def decide(self, state: MatchState) -> float | None:
        """
        Returns the paddle's new velocity.

        Returns:
            0.0 when the ball can't be seen yet, None when the paddle misses
            its reaction this tick (keep the current velocity), otherwise the
            velocity that moves the paddle center toward the ball.
        """
        if not self.sees_ball(state):
            return 0.0

        if self.rng.random() >= self.difficulty:
            return None

        center = state.paddle(self.side).center(game_config.PADDLE_HEIGHT)
        speed = game_config.PADDLE_SPEED
        if state.ball.y > center:
            return speed
        if state.ball.y < center:
            return -speed
        return 0.0
