"""
Frame driver: runs one match tick at a time
"""

import copy
import logging
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

import numpy as np

from classic_pong.ai.opponent import OpponentController
from classic_pong.core.entities import MatchPhase
from classic_pong.core.entities import MatchState
from classic_pong.core.entities import PaddleIntent
from classic_pong.core.entities import Side
from classic_pong.core.interfaces.listener import MatchListener
from classic_pong.core.interfaces.renderer import RendererProtocol
from classic_pong.core.physics import StepEvents
from classic_pong.core.physics import advance
from classic_pong.core.referee import CONTINUES
from classic_pong.core.referee import MatchOutcome
from classic_pong.core.referee import check_end
from classic_pong.utils.config import MatchSettings
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class TickEffect(Enum):
    """What the host should do after a tick"""

    SCHEDULE_NEXT = "schedule_next"
    STOP = "stop"


@dataclass
class TickResult:
    """Outcome of one tick, returned to the host"""

    effect: TickEffect
    events: StepEvents = field(default_factory=dict)
    outcome: MatchOutcome = CONTINUES
    error: Exception | None = None

    @property
    def schedule_next(self) -> bool:
        return self.effect is TickEffect.SCHEDULE_NEXT


class FrameDriver:
    """
    Owns the match state and orchestrates each tick.

    A tick runs the computer opponent (when enabled), the physics step and the
    referee, then renders. The driver never loops by itself: every tick
    returns a ``TickResult`` and the host calls ``tick`` again only when the
    result asks for it.
    """

    def __init__(
        self,
        renderer: RendererProtocol | None = None,
        listeners: list[MatchListener] | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ):
        self.renderer = renderer
        self.listeners: list[MatchListener] = list(listeners or [])
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.state = MatchState.create()
        self.opponent: OpponentController | None = None
        self.halted = False
        self.tick_count = 0

    def add_listener(self, listener: MatchListener) -> None:
        self.listeners.append(listener)

    def start_match(self, settings: MatchSettings | None = None) -> TickResult:
        """Starts a new match with a fresh state and requests the first tick"""
        settings = settings or MatchSettings()
        ai_side = Side(settings.ai_side)

        self.state = MatchState.create(
            opponent_is_computer=settings.opponent_is_computer,
            difficulty=settings.reaction_probability,
            ai_side=ai_side,
        )
        self.opponent = (
            OpponentController.for_state(self.state, rng=self.rng)
            if settings.opponent_is_computer
            else None
        )
        self.halted = False
        self.tick_count = 0
        self.state.phase = MatchPhase.RUNNING

        logger.info(
            "Match started: mode=%s difficulty=%s (%.1f)",
            settings.mode.value,
            settings.difficulty.value,
            settings.reaction_probability,
        )
        for listener in self.listeners:
            listener.on_match_start(self.state)

        return TickResult(effect=TickEffect.SCHEDULE_NEXT)

    def tick(self) -> TickResult:
        """
        Runs one tick.

        An exception raised by any step is a defect, not a game event: it is
        logged, the state is rolled back to what it was before the tick, and
        the driver halts until the next match.
        """
        if self.halted or self.state.phase is not MatchPhase.RUNNING:
            return TickResult(effect=TickEffect.STOP)

        snapshot = copy.deepcopy(self.state)
        try:
            result = self._run_tick()
        except Exception as e:
            logger.exception("Tick %d failed, halting simulation", self.tick_count + 1)
            self.state = snapshot
            self.halted = True
            return TickResult(effect=TickEffect.STOP, error=e)

        self.tick_count += 1
        return result

    def _run_tick(self) -> TickResult:
        state = self.state

        if self.opponent is not None:
            velocity = self.opponent.decide(state)
            if velocity is not None:
                state.paddle(self.opponent.side).velocity = velocity

        events = advance(state)
        outcome = check_end(state)

        if self.renderer is not None:
            self.renderer.render(state)

        if outcome.finished and outcome.winner is not None:
            for listener in self.listeners:
                listener.on_match_end(outcome.winner)
            return TickResult(effect=TickEffect.STOP, events=events, outcome=outcome)

        return TickResult(effect=TickEffect.SCHEDULE_NEXT, events=events, outcome=outcome)

    def set_paddle_velocity(self, side: Side, intent: PaddleIntent) -> None:
        """
        Applies the latest input intent for a paddle.

        Last write wins: the value in effect when the next tick runs is used.
        Ignored outside a running match and for the computer-controlled side.
        """
        if self.state.phase is not MatchPhase.RUNNING:
            return
        if self.state.is_ai_controlled(side):
            logger.debug(
                "Ignoring %s intent for computer-controlled %s paddle", intent.value, side.value
            )
            return
        self.state.paddle(side).velocity = intent.to_velocity(game_config.PADDLE_SPEED)

    def reset_to_pre_match(self) -> bool:
        """
        Drops the current match and goes back to an idle state.

        Returns:
            False when already idle (nothing to do), True otherwise
        """
        if self.state.phase is MatchPhase.IDLE and not self.halted:
            return False

        self.state = MatchState.create()
        self.opponent = None
        self.halted = False
        self.tick_count = 0
        logger.debug("Back to pre-match state")
        return True

    def run_headless(self, max_ticks: int | None = None) -> TickResult:
        """
        Ticks synchronously until the match stops or ``max_ticks`` is reached.

        Returns:
            The last tick result
        """
        result = TickResult(effect=TickEffect.SCHEDULE_NEXT)
        ticks = 0
        while result.schedule_next and (max_ticks is None or ticks < max_ticks):
            result = self.tick()
            ticks += 1
        return result

    def is_running(self) -> bool:
        return self.state.phase is MatchPhase.RUNNING and not self.halted
