"""Geometric skin - flat shapes on a dark background."""

from typing import TYPE_CHECKING, Dict, Optional, Tuple

import pygame

from .base import BreakoutSkin
from ...config import (
    BACKGROUND_COLOR, BALL_COLOR, PADDLE_COLOR, TEXT_COLOR,
    LOST_COLOR, WON_COLOR, BRICK_COLORS, BRICK_ROW_COLORS,
)
from ...game_state import GameState

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import BrickGrid


class GeometricSkin(BreakoutSkin):
    """Renders the game onto a pygame surface.

    - Ball: light grey circle
    - Paddle: red rectangle
    - Bricks: one color per row, cycling red, orange, green, yellow
    - HUD: "Score: N Best: M" in the top-left corner
    - Terminal: "WINNER" or "GAME OVER" with the score and a restart button
    """

    SCORE_FONT_SIZE = 24
    TITLE_FONT_SIZE = 72
    DETAIL_FONT_SIZE = 36

    BUTTON_SIZE = (180, 48)
    BUTTON_COLOR = (60, 62, 80)
    BUTTON_OUTLINE = (255, 255, 255)

    def __init__(self, screen: pygame.Surface):
        """Initialize geometric skin.

        Args:
            screen: Surface to draw on
        """
        self._screen = screen
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._restart_button: Optional[pygame.Rect] = None

    @property
    def screen(self) -> pygame.Surface:
        return self._screen

    @property
    def restart_button_rect(self) -> Optional[pygame.Rect]:
        """Restart button area, or None while no terminal message is shown."""
        return self._restart_button

    def hit_restart_button(self, pos: Tuple[int, int]) -> bool:
        """Check if a click at pos lands on the visible restart button."""
        return self._restart_button is not None and self._restart_button.collidepoint(pos)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _blit_centered(self, text: str, size: int, color: Tuple[int, int, int],
                       center: Tuple[float, float]) -> None:
        surface = self._font(size).render(text, True, color)
        self._screen.blit(surface, surface.get_rect(center=(int(center[0]), int(center[1]))))

    def clear_frame(self) -> None:
        self._screen.fill(BACKGROUND_COLOR)

    def draw_ball(self, ball: 'Ball') -> None:
        pygame.draw.circle(
            self._screen, BALL_COLOR,
            (int(ball.x), int(ball.y)), int(ball.radius),
        )

    def draw_bricks(self, grid: 'BrickGrid') -> None:
        for _, row, brick in grid:
            if not brick.is_alive:
                continue
            color = BRICK_COLORS[BRICK_ROW_COLORS[row % len(BRICK_ROW_COLORS)]]
            pygame.draw.rect(self._screen, color, brick.rect)

    def draw_paddle(self, paddle: 'Paddle') -> None:
        pygame.draw.rect(self._screen, PADDLE_COLOR, paddle.rect)

    def draw_scores(self, current: int, best: int) -> None:
        text = self._font(self.SCORE_FONT_SIZE).render(
            f"Score: {current} Best: {best}", True, TEXT_COLOR
        )
        self._screen.blit(text, (8, 8))

    def draw_terminal_message(self, kind: GameState, score: int) -> None:
        width, height = self._screen.get_size()
        cx, cy = width / 2, height / 2

        if kind == GameState.WON:
            title, color = "WINNER", WON_COLOR
        else:
            title, color = "GAME OVER", LOST_COLOR

        self._blit_centered(title, self.TITLE_FONT_SIZE, color, (cx, cy))
        self._blit_centered(f"Score: {score}", self.DETAIL_FONT_SIZE, TEXT_COLOR, (cx, cy + 50))

        button = pygame.Rect((0, 0), self.BUTTON_SIZE)
        button.center = (int(cx), int(cy + 110))
        pygame.draw.rect(self._screen, self.BUTTON_COLOR, button)
        pygame.draw.rect(self._screen, self.BUTTON_OUTLINE, button, 2)
        self._blit_centered("Restart", self.DETAIL_FONT_SIZE, TEXT_COLOR, button.center)
        self._restart_button = button

    def reset(self) -> None:
        self._restart_button = None
