"""
Main game application with PyGame GUI
"""

import logging
from enum import Enum

import pygame

from classic_pong.core.driver import FrameDriver
from classic_pong.core.entities import MatchState
from classic_pong.core.entities import Side
from classic_pong.gui.human_player import KeyboardController
from classic_pong.gui.pygame_renderer import PygameRenderer
from classic_pong.utils.config import Difficulty
from classic_pong.utils.config import GameMode
from classic_pong.utils.config import MatchSettings

logger = logging.getLogger(__name__)


class AppState(Enum):
    """Current application state"""

    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    HALTED = "halted"


MENU_DIFFICULTY = 0
MENU_MODE = 1
MENU_START = 2
MENU_QUIT = 3

MODE_LABELS = {GameMode.SINGLE: "1 player (vs computer)", GameMode.MULTI: "2 players"}


class ClassicPongApp:
    """Pygame host: menu, frame scheduling and match lifecycle"""

    def __init__(self, settings: MatchSettings | None = None, seed: int | None = None) -> None:
        self.renderer = PygameRenderer()
        self.driver = FrameDriver(renderer=self.renderer, listeners=[self], seed=seed)
        self.controller: KeyboardController | None = None

        self.state = AppState.MENU
        self.running = True
        self.pending_tick = False
        self.announcement = ""

        settings = settings or MatchSettings()
        self.difficulty = settings.difficulty
        self.mode = settings.mode
        self.ai_side = settings.ai_side
        self.menu_selected = MENU_START

    # Match lifecycle signals

    def on_match_start(self, state: MatchState) -> None:
        self.state = AppState.PLAYING
        self.announcement = ""

    def on_match_end(self, winner: Side) -> None:
        self.announcement = f"{winner.value.capitalize()} player wins!"
        self.state = AppState.GAME_OVER
        logger.info(self.announcement)

    # Menu

    def menu_options(self) -> list[tuple[str, str]]:
        return [
            ("Difficulty", self.difficulty.value.capitalize()),
            ("Mode", MODE_LABELS[self.mode]),
            ("Start", ""),
            ("Quit", ""),
        ]

    def _cycle(self, step: int) -> None:
        if self.menu_selected == MENU_DIFFICULTY:
            choices = list(Difficulty)
            self.difficulty = choices[(choices.index(self.difficulty) + step) % len(choices)]
        elif self.menu_selected == MENU_MODE:
            modes = list(GameMode)
            self.mode = modes[(modes.index(self.mode) + step) % len(modes)]

    def handle_menu_input(self, event: pygame.event.Event) -> None:
        """Handle input in menu state"""
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_UP:
            self.menu_selected = (self.menu_selected - 1) % len(self.menu_options())
        elif event.key == pygame.K_DOWN:
            self.menu_selected = (self.menu_selected + 1) % len(self.menu_options())
        elif event.key == pygame.K_LEFT:
            self._cycle(-1)
        elif event.key == pygame.K_RIGHT:
            self._cycle(1)
        elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
            if self.menu_selected == MENU_QUIT:
                self.running = False
            elif self.menu_selected == MENU_START:
                self.start_match()
        elif event.key == pygame.K_ESCAPE:
            self.running = False

    def start_match(self) -> None:
        settings = MatchSettings(difficulty=self.difficulty, mode=self.mode, ai_side=self.ai_side)
        human_side = Side(settings.ai_side).opponent
        self.controller = KeyboardController(self.driver, settings.mode, human_side=human_side)
        self.pending_tick = self.driver.start_match(settings).schedule_next

    def return_to_menu(self) -> None:
        """Return to the pre-match menu"""
        self.pending_tick = False
        self.driver.reset_to_pre_match()
        self.controller = None
        self.state = AppState.MENU

    # Main loop

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif self.state == AppState.MENU:
            self.handle_menu_input(event)
        elif self.state == AppState.PLAYING and self.controller is not None:
            action = self.controller.handle_event(event)
            if action == "menu":
                self.return_to_menu()
            elif action == "quit":
                self.running = False
        elif event.type == pygame.KEYDOWN and event.key in (
            pygame.K_RETURN,
            pygame.K_SPACE,
            pygame.K_ESCAPE,
        ):
            self.return_to_menu()

    def update(self) -> None:
        """Runs the next tick when the previous one asked for it"""
        if self.state != AppState.PLAYING or not self.pending_tick:
            return
        result = self.driver.tick()
        self.pending_tick = result.schedule_next
        if result.error is not None:
            self.state = AppState.HALTED

    def render(self) -> None:
        """Draw what the current tick did not already draw"""
        if self.state == AppState.MENU:
            self.renderer.draw_menu(self.menu_options(), self.menu_selected)
        elif self.state == AppState.GAME_OVER:
            self.renderer.render(self.driver.state)
            self.renderer.draw_game_over(self.announcement, self.driver.state.scores.to_tuple())
        elif self.state == AppState.HALTED:
            self.renderer.render(self.driver.state)
            self.renderer.draw_halted()
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Classic Pong...")
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update()
                self.render()
                self.renderer.update()
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.renderer.cleanup()
        pygame.quit()
        logger.info("Classic Pong closed properly.")


def main(settings: MatchSettings | None = None, seed: int | None = None) -> None:
    """Main entry point"""
    app = ClassicPongApp(settings, seed=seed)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
