"""
Match referee: detects the end of a match
"""

import logging
from dataclasses import dataclass

from classic_pong.core.entities import MatchPhase
from classic_pong.core.entities import MatchState
from classic_pong.core.entities import Side
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchOutcome:
    """Result of an end-of-match check"""

    finished: bool
    winner: Side | None = None

    def __post_init__(self) -> None:
        if self.finished and self.winner is None:
            raise ValueError("A finished match must have a winner")

    @property
    def announcement(self) -> str | None:
        if self.winner is None:
            return None
        return f"{self.winner.value.capitalize()} player wins!"


CONTINUES = MatchOutcome(finished=False)


def check_end(state: MatchState) -> MatchOutcome:
    """
    Checks whether a player reached the winning score.

    Scores are only observed here; points are awarded by the physics step.
    On the first check that sees the threshold the state moves to FINISHED
    and records the winner. Later checks on a finished state report the same
    outcome without touching it again.
    """
    if state.phase is MatchPhase.FINISHED:
        return MatchOutcome(finished=True, winner=state.winner)

    winning_score = game_config.WINNING_SCORE
    for side in (Side.LEFT, Side.RIGHT):
        if state.scores.of(side) >= winning_score:
            state.phase = MatchPhase.FINISHED
            state.winner = side
            logger.info(
                "Match finished: %s player wins %d - %d", side.value, *state.scores.to_tuple()
            )
            return MatchOutcome(finished=True, winner=side)

    return CONTINUES
