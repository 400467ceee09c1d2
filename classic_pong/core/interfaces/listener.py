"""
Match listener protocol - lifecycle signals sent to the host
"""

from typing import Protocol

from classic_pong.core.entities import MatchState
from classic_pong.core.entities import Side


class MatchListener(Protocol):
    """
    Protocol for objects notified of match start and end.

    The host uses these signals to toggle between the menu and the board,
    and on end to announce the winner and go back to a pre-match state.
    """

    def on_match_start(self, state: MatchState) -> None:
        """
        Called once when a match enters the running phase.

        Args:
            state: Freshly created match state
        """
        ...

    def on_match_end(self, winner: Side) -> None:
        """
        Called once when a player reaches the winning score.

        Args:
            winner: Side of the winning player
        """
        ...
