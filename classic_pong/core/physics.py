"""
Physics step for Classic Pong
"""

import logging
from typing import Any

from classic_pong.core.collision import ball_paddle_overlap
from classic_pong.core.collision import check_ball_goal_lines
from classic_pong.core.collision import check_ball_walls
from classic_pong.core.entities import MatchState
from classic_pong.core.entities import PaddleState
from classic_pong.core.entities import Side
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)

StepEvents = dict[str, list[Any]]


def advance(state: MatchState) -> StepEvents:
    """
    Advances the match by one tick, mutating ``state`` in place.

    Moves paddles and ball, reflects the ball off the top/bottom walls and the
    paddles, and awards a point when a paddle misses. The wall check runs
    independently of the paddle checks, so both may fire in the same tick.

    Args:
        state: Match state to advance

    Returns:
        Events of the tick:
        {
            "wall_bounces": ["top" | "bottom"],
            "paddle_hits": [{"side": Side}],
            "goals": [{"side": Side, "score": (left, right)}],
        }
    """
    events: StepEvents = {"wall_bounces": [], "paddle_hits": [], "goals": []}
    radius = game_config.BALL_RADIUS
    ball = state.ball

    # Move paddles
    state.left_paddle.position += state.left_paddle.velocity
    state.right_paddle.position += state.right_paddle.velocity

    # Move ball
    ball.x += ball.vx
    ball.y += ball.vy

    # Top/bottom walls
    wall = check_ball_walls(ball, radius, state.field_height)
    if wall is not None:
        ball.vy = -ball.vy
        ball.y = radius if wall == "top" else state.field_height - radius
        events["wall_bounces"].append(wall)

    # Left/right edges
    edge = check_ball_goal_lines(ball, radius, state.field_width)
    if edge is not None:
        _resolve_edge(state, Side(edge), events)

    _clamp_paddle(state.left_paddle, state.field_height)
    _clamp_paddle(state.right_paddle, state.field_height)

    return events


def _resolve_edge(state: MatchState, side: Side, events: StepEvents) -> None:
    """Bounces the ball off the paddle on ``side``, or scores for the opponent"""
    radius = game_config.BALL_RADIUS
    ball = state.ball
    paddle = state.paddle(side)

    if ball_paddle_overlap(ball, paddle, radius, game_config.PADDLE_HEIGHT):
        ball.vx = -ball.vx
        ball.x = radius if side is Side.LEFT else state.field_width - radius
        events["paddle_hits"].append({"side": side})
        return

    scorer = side.opponent
    state.scores.award(scorer)
    state.recenter_ball()
    events["goals"].append({"side": scorer, "score": state.scores.to_tuple()})
    logger.debug("%s player scores, now %d - %d", scorer.value, *state.scores.to_tuple())


def _clamp_paddle(paddle: PaddleState, field_height: float) -> None:
    """Keeps the paddle inside the field"""
    max_y = field_height - game_config.PADDLE_HEIGHT
    paddle.position = max(0.0, min(max_y, paddle.position))
