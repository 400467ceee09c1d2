"""
Tests for keyboard controls
"""

import pygame
import pytest

from classic_pong.core.driver import FrameDriver
from classic_pong.core.entities import Side
from classic_pong.gui.human_player import KeyboardController
from classic_pong.utils.config import KEYBOARD_LAYOUTS
from classic_pong.utils.config import GameMode
from classic_pong.utils.config import MatchSettings


def key_down(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYUP, key=key)


@pytest.fixture
def multi_driver() -> FrameDriver:
    driver = FrameDriver(seed=0)
    driver.start_match(MatchSettings(mode=GameMode.MULTI))
    return driver


@pytest.fixture
def single_driver() -> FrameDriver:
    driver = FrameDriver(seed=0)
    driver.start_match(MatchSettings(mode=GameMode.SINGLE))
    return driver


class TestMultiplayerControls:
    def test_arrows_drive_right_paddle(self, multi_driver):
        controller = KeyboardController(multi_driver, GameMode.MULTI, layout=KEYBOARD_LAYOUTS["qwerty"])

        controller.handle_event(key_down(pygame.K_UP))

        assert multi_driver.state.right_paddle.velocity == -5.0
        assert multi_driver.state.left_paddle.velocity == 0.0

    def test_alternate_keys_drive_left_paddle(self, multi_driver):
        controller = KeyboardController(multi_driver, GameMode.MULTI, layout=KEYBOARD_LAYOUTS["qwerty"])

        controller.handle_event(key_down(pygame.K_s))

        assert multi_driver.state.left_paddle.velocity == 5.0
        assert multi_driver.state.right_paddle.velocity == 0.0

    def test_release_stops_only_that_side(self, multi_driver):
        controller = KeyboardController(multi_driver, GameMode.MULTI, layout=KEYBOARD_LAYOUTS["qwerty"])
        controller.handle_event(key_down(pygame.K_w))
        controller.handle_event(key_down(pygame.K_DOWN))

        controller.handle_event(key_up(pygame.K_w))

        assert multi_driver.state.left_paddle.velocity == 0.0
        assert multi_driver.state.right_paddle.velocity == 5.0

    def test_azerty_layout(self, multi_driver):
        controller = KeyboardController(multi_driver, GameMode.MULTI, layout=KEYBOARD_LAYOUTS["azerty"])

        controller.handle_event(key_down(pygame.K_z))

        assert multi_driver.state.left_paddle.velocity == -5.0


class TestSinglePlayerControls:
    @pytest.mark.parametrize("key,velocity", [(pygame.K_UP, -5.0), (pygame.K_s, 5.0)])
    def test_both_key_pairs_drive_human_side(self, single_driver, key, velocity):
        controller = KeyboardController(
            single_driver, GameMode.SINGLE, human_side=Side.LEFT, layout=KEYBOARD_LAYOUTS["qwerty"]
        )

        controller.handle_event(key_down(key))

        assert single_driver.state.left_paddle.velocity == velocity
        assert single_driver.state.right_paddle.velocity == 0.0

    def test_arrow_release_stops_human_side(self, single_driver):
        controller = KeyboardController(
            single_driver, GameMode.SINGLE, human_side=Side.LEFT, layout=KEYBOARD_LAYOUTS["qwerty"]
        )
        controller.handle_event(key_down(pygame.K_UP))

        controller.handle_event(key_up(pygame.K_UP))

        assert single_driver.state.left_paddle.velocity == 0.0

    def test_control_info(self, single_driver):
        controller = KeyboardController(
            single_driver, GameMode.SINGLE, human_side=Side.LEFT, layout=KEYBOARD_LAYOUTS["qwerty"]
        )

        assert controller.get_control_info() == {Side.LEFT: "W/S or Arrows"}


class TestSpecialActions:
    def test_escape_returns_menu(self, multi_driver):
        controller = KeyboardController(multi_driver, GameMode.MULTI)

        assert controller.handle_event(key_down(pygame.K_ESCAPE)) == "menu"

    def test_quit_event(self, multi_driver):
        controller = KeyboardController(multi_driver, GameMode.MULTI)

        assert controller.handle_event(pygame.event.Event(pygame.QUIT)) == "quit"

    def test_unmapped_key_is_ignored(self, multi_driver):
        controller = KeyboardController(multi_driver, GameMode.MULTI)

        assert controller.handle_event(key_down(pygame.K_x)) is None
        assert multi_driver.state.left_paddle.velocity == 0.0
        assert multi_driver.state.right_paddle.velocity == 0.0
