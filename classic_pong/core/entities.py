"""
Classic Pong match state: paddles, ball, scores
"""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum

from classic_pong.utils.config import game_config


class Side(Enum):
    """Side of the playing surface"""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class MatchPhase(Enum):
    """Match lifecycle"""

    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


class PaddleIntent(Enum):
    """Velocity intent delivered by an input source"""

    UP = "up"
    DOWN = "down"
    STOP = "stop"

    def to_velocity(self, speed: float) -> float:
        """Signed velocity for this intent; the vertical axis grows downward"""
        if self is PaddleIntent.UP:
            return -speed
        if self is PaddleIntent.DOWN:
            return speed
        return 0.0


@dataclass
class PaddleState:
    """Vertical paddle: top-edge position and signed velocity per tick"""

    position: float
    velocity: float = 0.0

    def span(self, height: float) -> tuple[float, float]:
        """Vertical interval covered by the paddle"""
        return (self.position, self.position + height)

    def center(self, height: float) -> float:
        return self.position + height / 2


@dataclass
class BallState:
    """Ball center and signed per-axis speed"""

    x: float
    y: float
    vx: float
    vy: float

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.vx, self.vy)


@dataclass
class Scores:
    left: int = 0
    right: int = 0

    def of(self, side: Side) -> int:
        return self.left if side is Side.LEFT else self.right

    def award(self, side: Side) -> int:
        """Adds one point to ``side`` and returns its new score"""
        if side is Side.LEFT:
            self.left += 1
            return self.left
        self.right += 1
        return self.right

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass
class MatchState:
    """Everything that changes during a match.

    Owned by the frame driver and handed by reference to the physics step,
    the opponent controller and the referee. Never persisted: a fresh state
    is built for every match.
    """

    left_paddle: PaddleState
    right_paddle: PaddleState
    ball: BallState
    field_width: float
    field_height: float
    scores: Scores = field(default_factory=Scores)
    opponent_is_computer: bool = False
    difficulty: float = 0.1
    ai_side: Side = Side.RIGHT
    phase: MatchPhase = MatchPhase.IDLE
    winner: Side | None = None

    @classmethod
    def create(
        cls,
        opponent_is_computer: bool = False,
        difficulty: float = 0.1,
        ai_side: Side = Side.RIGHT,
        field_width: float | None = None,
        field_height: float | None = None,
    ) -> "MatchState":
        """Builds a fresh state: paddles and ball centered, scores zeroed"""
        if not 0.0 <= difficulty <= 1.0:
            raise ValueError(f"difficulty must be within [0, 1], got {difficulty}")

        width = float(field_width if field_width is not None else game_config.FIELD_WIDTH)
        height = float(field_height if field_height is not None else game_config.FIELD_HEIGHT)
        paddle_y = (height - game_config.PADDLE_HEIGHT) / 2
        speed = game_config.BALL_SPEED

        return cls(
            left_paddle=PaddleState(paddle_y),
            right_paddle=PaddleState(paddle_y),
            ball=BallState(width / 2, height / 2, speed, speed),
            field_width=width,
            field_height=height,
            opponent_is_computer=opponent_is_computer,
            difficulty=difficulty,
            ai_side=ai_side,
        )

    def paddle(self, side: Side) -> PaddleState:
        return self.left_paddle if side is Side.LEFT else self.right_paddle

    def is_ai_controlled(self, side: Side) -> bool:
        return self.opponent_is_computer and side is self.ai_side

    def recenter_ball(self) -> None:
        """Puts the ball back in the middle of the field, keeping its velocity"""
        self.ball.x = self.field_width / 2
        self.ball.y = self.field_height / 2
