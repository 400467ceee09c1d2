"""
Keyboard input for Classic Pong
"""

import logging

import pygame

from classic_pong.core.driver import FrameDriver
from classic_pong.core.entities import PaddleIntent
from classic_pong.core.entities import Side
from classic_pong.utils.config import GameMode
from classic_pong.utils.config import KeyboardLayout
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class KeyboardController:
    """Translates key presses and releases into paddle intents"""

    def __init__(
        self,
        driver: FrameDriver,
        mode: GameMode,
        human_side: Side = Side.LEFT,
        layout: KeyboardLayout | None = None,
    ):
        """
        Initialize keyboard controls

        Args:
            driver: Frame driver receiving the intents
            mode: SINGLE routes both key pairs to ``human_side``; MULTI gives
                the arrows to the right paddle and the alternate pair to the left
            human_side: Paddle of the human player in single-player mode
            layout: Keyboard layout, defaults to the configured one
        """
        self.driver = driver
        self.mode = mode
        self.human_side = human_side
        self.layout = layout or game_config.get_keyboard_layout()

        if mode == GameMode.MULTI:
            arrows_side, alternate_side = Side.RIGHT, Side.LEFT
        else:
            arrows_side = alternate_side = human_side

        # key code -> (side, intent on press)
        self.key_mapping: dict[int, tuple[Side, PaddleIntent]] = {
            self.layout.arrow_keys["up"]: (arrows_side, PaddleIntent.UP),
            self.layout.arrow_keys["down"]: (arrows_side, PaddleIntent.DOWN),
            self.layout.alternate_keys["up"]: (alternate_side, PaddleIntent.UP),
            self.layout.alternate_keys["down"]: (alternate_side, PaddleIntent.DOWN),
        }

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating special actions (menu, quit) or None
        """
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return "menu"
            if event.key in self.key_mapping:
                side, intent = self.key_mapping[event.key]
                self.driver.set_paddle_velocity(side, intent)

        elif event.type == pygame.KEYUP:
            if event.key in self.key_mapping:
                side, _ = self.key_mapping[event.key]
                self.driver.set_paddle_velocity(side, PaddleIntent.STOP)

        elif event.type == pygame.QUIT:
            return "quit"

        return None

    def get_control_info(self) -> dict[Side, str]:
        """Human readable controls per side"""
        alternate = f"{self.layout.display_names['up']}/{self.layout.display_names['down']}"
        if self.mode == GameMode.MULTI:
            return {Side.LEFT: alternate, Side.RIGHT: "Arrows"}
        return {self.human_side: f"{alternate} or Arrows"}
