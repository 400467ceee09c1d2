"""
Collision tests for Classic Pong
"""

from classic_pong.core.entities import BallState
from classic_pong.core.entities import PaddleState


def spans_overlap(a: tuple[float, float], b: tuple[float, float]) -> bool:
    """Checks if two closed intervals overlap (touching counts)"""
    return a[0] <= b[1] and b[0] <= a[1]


def ball_vertical_span(ball: BallState, radius: float) -> tuple[float, float]:
    """Vertical interval covered by the ball"""
    return (ball.y - radius, ball.y + radius)


def ball_paddle_overlap(
    ball: BallState, paddle: PaddleState, radius: float, paddle_height: float
) -> bool:
    """Checks if the ball's vertical extent meets the paddle span"""
    return spans_overlap(ball_vertical_span(ball, radius), paddle.span(paddle_height))


def check_ball_walls(ball: BallState, radius: float, field_height: float) -> str | None:
    """
    Detects the ball reaching the top or bottom wall.

    Returns "top", "bottom" or None. A ball exactly tangent to a wall counts as
    touching it.
    """
    if ball.y - radius <= 0:
        return "top"
    if ball.y + radius >= field_height:
        return "bottom"
    return None


def check_ball_goal_lines(ball: BallState, radius: float, field_width: float) -> str | None:
    """Detects the ball reaching the left or right edge. Returns "left", "right" or None."""
    if ball.x - radius <= 0:
        return "left"
    if ball.x + radius >= field_width:
        return "right"
    return None
