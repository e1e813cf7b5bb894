"""Paddle entity driven by latched left/right input.

The input collaborator latches a direction on key press and clears it on
release. Each tick the paddle moves one step in the held direction and is
clamped to the arena.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PaddleConfig:
    """Paddle configuration."""

    width: float = 230.0
    height: float = 20.0
    step: float = 7.0            # Pixels per tick while a direction is held
    bottom_offset: float = 40.0  # Distance from paddle top to arena bottom
    aim_speed: float = 5.0       # Ball dx when hit at the paddle edge


class Paddle:
    """Player paddle. ``x`` is the left edge, ``y`` the top edge."""

    def __init__(
        self,
        config: PaddleConfig,
        arena_width: float,
        arena_height: float,
    ):
        """Initialize paddle centered horizontally.

        Args:
            config: Paddle configuration
            arena_width: Arena width in pixels
            arena_height: Arena height in pixels
        """
        self._config = config
        self._arena_width = arena_width
        self._y = arena_height - config.bottom_offset
        self._x = (arena_width - config.width) / 2
        self._moving_left = False
        self._moving_right = False

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top Y."""
        return self._y

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def center_x(self) -> float:
        return self._x + self._config.width / 2

    @property
    def right(self) -> float:
        return self._x + self._config.width

    @property
    def max_x(self) -> float:
        """Largest allowed left edge."""
        return self._arena_width - self._config.width

    @property
    def aim_speed(self) -> float:
        return self._config.aim_speed

    @property
    def moving_left(self) -> bool:
        return self._moving_left

    @property
    def moving_right(self) -> bool:
        return self._moving_right

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._config.width, self._config.height)

    def set_moving_left(self, pressed: bool) -> None:
        self._moving_left = pressed

    def set_moving_right(self, pressed: bool) -> None:
        self._moving_right = pressed

    def update(self) -> None:
        """Apply held input for one tick.

        Right takes priority when both directions are held.
        """
        if self._moving_right:
            self._x += self._config.step
        elif self._moving_left:
            self._x -= self._config.step
        else:
            return
        self._x = max(0.0, min(self.max_x, self._x))

    def set_x(self, x: float) -> None:
        """Place the paddle's left edge, clamped to the arena."""
        self._x = max(0.0, min(self.max_x, x))
