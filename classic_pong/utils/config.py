"""
Classic Pong configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    alternate_keys: dict[str, int]
    arrow_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        alternate_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        alternate_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        alternate_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


class Difficulty(Enum):
    """Opponent difficulty presets, valued by reaction probability"""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def reaction_probability(self) -> float:
        return DIFFICULTY_PRESETS[self]


DIFFICULTY_PRESETS = {
    Difficulty.EASY: 0.1,
    Difficulty.MEDIUM: 0.5,
    Difficulty.HARD: 0.9,
}


class GameMode(Enum):
    """Available game modes"""

    SINGLE = "single"
    MULTI = "multi"


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=600, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=400, gt=0, description="Field height in pixels")

    # Ball
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius in pixels")
    BALL_SPEED: float = Field(default=2.5, gt=0, description="Ball speed per axis, per tick")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=80.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=5.0, gt=0, description="Paddle speed per tick")

    # Gameplay
    WINNING_SCORE: int = Field(default=5, gt=0, description="Winning score")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(238, 238, 238), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(default=(68, 68, 68), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        if self.PADDLE_HEIGHT >= self.FIELD_HEIGHT:
            raise ValueError(
                f"PADDLE_HEIGHT ({self.PADDLE_HEIGHT}) must be smaller than "
                f"FIELD_HEIGHT ({self.FIELD_HEIGHT})"
            )

        min_width = 4 * self.BALL_RADIUS + 2 * self.PADDLE_WIDTH
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        if self.FIELD_HEIGHT < 4 * self.BALL_RADIUS:
            raise ValueError(f"FIELD_HEIGHT must be at least {4 * self.BALL_RADIUS} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "classic_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "classic_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


class MatchSettings(BaseModel):
    """Options selected once before a match starts.

    Unknown selections never fail: difficulty falls back to the easiest
    preset and any mode other than ``single`` means two human players.
    """

    model_config = {"frozen": True}

    difficulty: Difficulty = Field(default=Difficulty.EASY, description="Opponent difficulty")
    mode: GameMode = Field(default=GameMode.SINGLE, description="Single player or multiplayer")
    ai_side: str = Field(default="right", description="Side played by the computer")

    @field_validator("difficulty", mode="before")
    @classmethod
    def coerce_difficulty(cls, v: Any) -> Difficulty:
        if isinstance(v, Difficulty):
            return v
        try:
            return Difficulty(str(v).lower())
        except ValueError:
            logger.warning("Unknown difficulty %r, using %s", v, Difficulty.EASY.value)
            return Difficulty.EASY

    @field_validator("mode", mode="before")
    @classmethod
    def coerce_mode(cls, v: Any) -> GameMode:
        if isinstance(v, GameMode):
            return v
        return GameMode.SINGLE if str(v).lower() == GameMode.SINGLE.value else GameMode.MULTI

    @field_validator("ai_side")
    @classmethod
    def validate_ai_side(cls, v: str) -> str:
        v = v.lower()
        if v not in ("left", "right"):
            raise ValueError(f"ai_side must be 'left' or 'right', got '{v}'")
        return v

    @property
    def opponent_is_computer(self) -> bool:
        return self.mode == GameMode.SINGLE

    @property
    def reaction_probability(self) -> float:
        return self.difficulty.reaction_probability


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "classic_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
        _change_values(game_config, **loaded_config.model_dump())
    except FileNotFoundError:
        logger.info("No configuration file at %s, using defaults", filepath)
        return False
    except (ValueError, json.JSONDecodeError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values, validating them together first

    Returns the previous values of the changed fields. Nothing is modified
    when the combined values are invalid.
    """
    old_values = {name: getattr(obj, name) for name in kwargs}
    candidate = type(obj).model_validate({**obj.model_dump(), **kwargs})
    # Fields already validated as a whole, skip per-field assignment checks
    obj.__dict__.update({name: getattr(candidate, name) for name in kwargs})
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
