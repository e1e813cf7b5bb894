"""Base class for Breakout skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...game_state import GameState
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import BrickGrid


class BreakoutSkin(ABC):
    """Render collaborator.

    The game calls these once per tick in order: clear_frame, draw_ball,
    draw_bricks, draw_paddle, draw_scores. At a terminal transition it
    calls clear_frame then draw_terminal_message.
    """

    @abstractmethod
    def clear_frame(self) -> None:
        """Erase the previous frame."""
        pass

    @abstractmethod
    def draw_ball(self, ball: 'Ball') -> None:
        pass

    @abstractmethod
    def draw_bricks(self, grid: 'BrickGrid') -> None:
        """Draw every alive brick at its laid-out position."""
        pass

    @abstractmethod
    def draw_paddle(self, paddle: 'Paddle') -> None:
        pass

    @abstractmethod
    def draw_scores(self, current: int, best: int) -> None:
        pass

    @abstractmethod
    def draw_terminal_message(self, kind: 'GameState', score: int) -> None:
        """Draw the win or game-over message with the final score.

        Args:
            kind: GameState.WON or GameState.LOST
            score: Final score
        """
        pass

    def reset(self) -> None:
        """Forget any terminal overlay state when a new session starts."""
        pass


class NullSkin(BreakoutSkin):
    """Draws nothing. For headless runs."""

    def clear_frame(self) -> None:
        pass

    def draw_ball(self, ball: 'Ball') -> None:
        pass

    def draw_bricks(self, grid: 'BrickGrid') -> None:
        pass

    def draw_paddle(self, paddle: 'Paddle') -> None:
        pass

    def draw_scores(self, current: int, best: int) -> None:
        pass

    def draw_terminal_message(self, kind: 'GameState', score: int) -> None:
        pass
