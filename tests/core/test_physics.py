"""
Unit tests for the physics step

Tests physics step functionality including:
- Paddle and ball movement
- Top/bottom wall reflection
- Paddle bounce and miss on both edges
- Paddle clamping
"""

import numpy as np
import pytest

from classic_pong.core.entities import BallState
from classic_pong.core.entities import MatchState
from classic_pong.core.entities import Side
from classic_pong.core.physics import advance
from classic_pong.utils.config import game_config


def make_state(ball: BallState, left: float = 160.0, right: float = 160.0) -> MatchState:
    state = MatchState.create()
    state.ball = ball
    state.left_paddle.position = left
    state.right_paddle.position = right
    return state


class TestMovement:
    """Test position updates"""

    def test_ball_moves_by_velocity(self):
        state = make_state(BallState(300.0, 200.0, 2.5, -2.5))

        events = advance(state)

        assert (state.ball.x, state.ball.y) == (302.5, 197.5)
        assert events == {"wall_bounces": [], "paddle_hits": [], "goals": []}

    def test_paddles_move_by_velocity(self):
        state = make_state(BallState(300.0, 200.0, 2.5, 2.5))
        state.left_paddle.velocity = -5.0
        state.right_paddle.velocity = 5.0

        advance(state)

        assert state.left_paddle.position == 155.0
        assert state.right_paddle.position == 165.0


class TestWalls:
    """Test top/bottom wall reflection"""

    def test_top_wall_reflects(self):
        state = make_state(BallState(300.0, 12.0, 2.5, -2.5))

        events = advance(state)

        assert state.ball.vy == 2.5
        assert state.ball.y == game_config.BALL_RADIUS
        assert events["wall_bounces"] == ["top"]

    def test_bottom_wall_reflects(self):
        state = make_state(BallState(300.0, 388.0, 2.5, 2.5))

        events = advance(state)

        assert state.ball.vy == -2.5
        assert state.ball.y == 400.0 - game_config.BALL_RADIUS
        assert events["wall_bounces"] == ["bottom"]

    def test_tangent_counts_as_crossing(self):
        """A ball landing exactly on the wall bounces"""
        state = make_state(BallState(300.0, 12.5, 2.5, -2.5))

        advance(state)

        assert state.ball.vy == 2.5

    @pytest.mark.parametrize(
        "y,vy,flips",
        [
            (200.0, 2.5, False),
            (13.0, -2.5, False),
            (12.5, -2.5, True),
            (11.0, -2.5, True),
            (387.0, 2.5, False),
            (387.5, 2.5, True),
        ],
    )
    def test_vertical_flip_iff_edge_reaches_wall(self, y, vy, flips):
        state = make_state(BallState(300.0, y, 2.5, vy))

        advance(state)

        assert (state.ball.vy == -vy) is flips

    def test_ball_does_not_stick_to_wall(self):
        """After a bounce the next tick moves the ball away without a second flip"""
        state = make_state(BallState(300.0, 11.0, 2.5, -2.5))

        advance(state)
        advance(state)

        assert state.ball.vy == 2.5
        assert state.ball.y > game_config.BALL_RADIUS


class TestPaddleEdges:
    """Test paddle bounces and misses"""

    def test_left_paddle_overlap_bounces(self):
        state = make_state(BallState(9.0, 170.0, -2.5, 0.0), left=160.0)

        events = advance(state)

        assert state.ball.vx == 2.5
        assert state.scores.to_tuple() == (0, 0)
        assert events["paddle_hits"] == [{"side": Side.LEFT}]

    def test_left_paddle_miss_scores_for_right(self):
        state = make_state(BallState(9.0, 170.0, -2.5, 0.0), left=0.0)

        events = advance(state)

        assert state.scores.to_tuple() == (0, 1)
        assert (state.ball.x, state.ball.y) == (300.0, 200.0)
        assert events["goals"] == [{"side": Side.RIGHT, "score": (0, 1)}]

    def test_right_paddle_overlap_bounces(self):
        state = make_state(BallState(591.0, 200.0, 2.5, 0.0), right=160.0)

        events = advance(state)

        assert state.ball.vx == -2.5
        assert state.ball.x == 600.0 - game_config.BALL_RADIUS
        assert events["paddle_hits"] == [{"side": Side.RIGHT}]

    def test_right_paddle_miss_scores_for_left(self):
        state = make_state(BallState(591.0, 50.0, 2.5, 0.0), right=300.0)

        events = advance(state)

        assert state.scores.to_tuple() == (1, 0)
        assert (state.ball.x, state.ball.y) == (300.0, 200.0)
        assert events["goals"][0]["side"] is Side.LEFT

    def test_ball_touching_paddle_end_bounces(self):
        """The ball's edge meeting the paddle's end counts as a hit"""
        state = make_state(BallState(9.0, 250.0, -2.5, 0.0), left=160.0)

        advance(state)

        assert state.ball.vx == 2.5

    def test_bounced_ball_leaves_the_edge(self):
        state = make_state(BallState(9.0, 170.0, -2.5, 0.0), left=160.0)

        advance(state)
        advance(state)

        assert state.ball.vx == 2.5
        assert state.ball.x == game_config.BALL_RADIUS + 2.5

    def test_wall_bounce_and_miss_in_same_tick(self):
        state = make_state(BallState(9.0, 12.0, -2.5, -2.5), left=300.0)

        events = advance(state)

        assert events["wall_bounces"] == ["top"]
        assert len(events["goals"]) == 1
        assert state.ball.vy == 2.5
        assert state.scores.right == 1


class TestPaddleClamping:
    """Test that paddles stay within bounds"""

    def test_clamped_at_bottom(self):
        state = make_state(BallState(300.0, 200.0, 2.5, 2.5), left=318.0)
        state.left_paddle.velocity = 5.0

        advance(state)

        assert state.left_paddle.position == 400.0 - game_config.PADDLE_HEIGHT

    def test_clamped_at_top(self):
        state = make_state(BallState(300.0, 200.0, 2.5, 2.5), right=2.0)
        state.right_paddle.velocity = -5.0

        advance(state)

        assert state.right_paddle.position == 0.0

    def test_paddles_always_in_bounds(self):
        rng = np.random.default_rng(7)
        state = MatchState.create()
        max_y = state.field_height - game_config.PADDLE_HEIGHT

        for _ in range(2000):
            state.left_paddle.velocity = float(rng.choice([-5.0, 0.0, 5.0]))
            state.right_paddle.velocity = float(rng.choice([-5.0, 0.0, 5.0]))
            advance(state)
            assert 0.0 <= state.left_paddle.position <= max_y
            assert 0.0 <= state.right_paddle.position <= max_y


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
