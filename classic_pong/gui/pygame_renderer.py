"""
PyGame renderer for Classic Pong
"""

import pygame

from classic_pong.core.entities import MatchState
from classic_pong.core.entities import PaddleState
from classic_pong.core.entities import Side
from classic_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer for Classic Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Classic Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.foreground_color: tuple[int, int, int] = game_config.FOREGROUND_COLOR
        self.highlight_color: tuple[int, int, int] = (200, 120, 0)
        self.error_color: tuple[int, int, int] = (180, 30, 30)

        self.font_large = pygame.font.Font(None, 56)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_paddle(self, paddle: PaddleState, side: Side) -> None:
        """Draw a paddle against its edge of the field"""
        x = 0 if side is Side.LEFT else self.width - game_config.PADDLE_WIDTH
        rect = pygame.Rect(
            int(x), int(paddle.position), int(game_config.PADDLE_WIDTH), int(game_config.PADDLE_HEIGHT)
        )
        pygame.draw.rect(self.screen, self.foreground_color, rect)

    def draw_ball(self, state: MatchState) -> None:
        pos = (int(state.ball.x), int(state.ball.y))
        pygame.draw.circle(self.screen, self.foreground_color, pos, int(game_config.BALL_RADIUS))

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw the current score"""
        text_surface = self.font_medium.render(f"{score[0]} - {score[1]}", True, self.foreground_color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.width // 2
        text_rect.top = 15
        self.screen.blit(text_surface, text_rect)

    def render(self, state: MatchState) -> None:
        """Render the complete match state"""
        self.clear_screen()
        self.draw_paddle(state.left_paddle, Side.LEFT)
        self.draw_paddle(state.right_paddle, Side.RIGHT)
        self.draw_ball(state)
        self.draw_score(state.scores.to_tuple())

    def _draw_overlay(self, alpha: int = 160) -> None:
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(alpha)
        overlay.fill(self.background_color)
        self.screen.blit(overlay, (0, 0))

    def _blit_centered(
        self, text: str, font: pygame.font.Font, y: int, color: tuple[int, int, int]
    ) -> None:
        surface = font.render(text, True, color)
        rect = surface.get_rect()
        rect.center = (self.width // 2, y)
        self.screen.blit(surface, rect)

    def draw_game_over(self, announcement: str, score: tuple[int, int]) -> None:
        """Draw game over screen"""
        self._draw_overlay()
        self._blit_centered(announcement, self.font_large, self.height // 2 - 40, self.foreground_color)
        self._blit_centered(
            f"Final score: {score[0]} - {score[1]}",
            self.font_medium,
            self.height // 2 + 10,
            self.foreground_color,
        )
        self._blit_centered(
            "Press ENTER to return to the menu",
            self.font_small,
            self.height // 2 + 60,
            self.foreground_color,
        )

    def draw_halted(self) -> None:
        """Draw the overlay shown after a tick failed"""
        self._draw_overlay()
        self._blit_centered("Simulation halted", self.font_large, self.height // 2 - 20, self.error_color)
        self._blit_centered(
            "See the log for details. Press ENTER for the menu",
            self.font_small,
            self.height // 2 + 30,
            self.foreground_color,
        )

    def draw_menu(self, options: list[tuple[str, str]], selected_option: int = 0) -> None:
        """
        Draw the pre-match menu

        Args:
            options: (label, current value) pairs
            selected_option: Index of the highlighted option
        """
        self.clear_screen()
        self._blit_centered("CLASSIC PONG", self.font_large, self.height // 5, self.foreground_color)

        for i, (label, value) in enumerate(options):
            color = self.highlight_color if i == selected_option else self.foreground_color
            text = f"{label}: {value}" if value else label
            self._blit_centered(text, self.font_medium, self.height // 2 - 30 + i * 45, color)

        self._blit_centered(
            "UP/DOWN to select, LEFT/RIGHT to change, ENTER to start",
            self.font_small,
            self.height - 40,
            self.foreground_color,
        )

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        self.clock.tick(fps or game_config.FPS)

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.display.quit()
