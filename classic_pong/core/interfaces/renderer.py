"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from classic_pong.core.entities import MatchState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Enables multiple rendering backends: Pygame, headless, terminal, etc.
    """

    def render(self, state: MatchState) -> None:
        """
        Render a single frame of the match.

        Called once per tick, after the physics step and the referee.
        Draws both paddles, the ball and the score.

        Args:
            state: Current match state (read only)
        """
        ...
