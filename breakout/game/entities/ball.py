"""Ball entity with per-tick velocity physics.

Velocity is in pixels per tick. Every operation returns a new Ball; the
game mode keeps the current one.
"""

from dataclasses import dataclass
import math
import random
from typing import Optional, Tuple

# Launch direction range, radians from +x in a y-up frame
MIN_LAUNCH_ANGLE: float = math.pi / 4
MAX_LAUNCH_ANGLE: float = 3 * math.pi / 4
_MAX_LAUNCH_SAMPLES: int = 8


@dataclass(frozen=True)
class BallConfig:
    """Ball configuration."""

    radius: float = 12.0
    speed: float = 5.0            # Launch speed in pixels per tick
    launch_gap: float = 20.0      # Extra space above the paddle at launch


def sample_launch_angle(rng: random.Random) -> float:
    """Sample a launch angle uniformly from [45, 135] degrees.

    A non-finite sample is drawn again; after repeated failures the
    angle falls back to straight up.

    Args:
        rng: Random source

    Returns:
        Angle in radians
    """
    for _ in range(_MAX_LAUNCH_SAMPLES):
        angle = rng.random() * (MAX_LAUNCH_ANGLE - MIN_LAUNCH_ANGLE) + MIN_LAUNCH_ANGLE
        if math.isfinite(angle) and MIN_LAUNCH_ANGLE <= angle <= MAX_LAUNCH_ANGLE:
            return angle
    return math.pi / 2


class Ball:
    """Ball with velocity-based movement and bouncing."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        dx: float = 0.0,
        dy: float = 0.0,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
            dx: X velocity (pixels/tick)
            dy: Y velocity (pixels/tick), positive is down
        """
        self._config = config
        self._x = x
        self._y = y
        self._dx = dx
        self._dy = dy

    @classmethod
    def initial_launch(
        cls,
        config: BallConfig,
        arena_width: float,
        paddle_y: float,
        paddle_height: float,
        rng: Optional[random.Random] = None,
    ) -> 'Ball':
        """Create a ball centered above the paddle, moving upward.

        Args:
            config: Ball configuration
            arena_width: Arena width in pixels
            paddle_y: Paddle top Y
            paddle_height: Paddle height
            rng: Random source for the launch angle

        Returns:
            New Ball with launch velocity
        """
        angle = sample_launch_angle(rng or random.Random())
        return cls(
            config,
            arena_width / 2,
            paddle_y - paddle_height - config.launch_gap,
            math.cos(angle) * config.speed,
            -math.sin(angle) * config.speed,
        )

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def dx(self) -> float:
        return self._dx

    @property
    def dy(self) -> float:
        return self._dy

    @property
    def radius(self) -> float:
        return self._config.radius

    @property
    def config(self) -> BallConfig:
        return self._config

    @property
    def speed(self) -> float:
        """Get current ball speed."""
        return math.hypot(self._dx, self._dy)

    @property
    def next_position(self) -> Tuple[float, float]:
        """Position after the pending displacement."""
        return (self._x + self._dx, self._y + self._dy)

    def integrate(self) -> 'Ball':
        """Advance one tick: x += dx, y += dy."""
        return Ball(self._config, self._x + self._dx, self._y + self._dy, self._dx, self._dy)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off vertical surface (reverse X velocity)."""
        return Ball(self._config, self._x, self._y, -self._dx, self._dy)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off horizontal surface (reverse Y velocity)."""
        return Ball(self._config, self._x, self._y, self._dx, -self._dy)

    def bounce_off_paddle(
        self,
        paddle_center_x: float,
        paddle_width: float,
        paddle_top: float,
        aim_speed: float,
    ) -> 'Ball':
        """Re-aim the ball off the paddle.

        Horizontal speed scales with the hit offset from the paddle center:
        dead center gives dx = 0, the edges give dx = +/- aim_speed. The
        ball always leaves moving up, resting on the paddle top.

        Args:
            paddle_center_x: Paddle center X
            paddle_width: Paddle width
            paddle_top: Paddle top Y
            aim_speed: Horizontal speed at the paddle edge

        Returns:
            New Ball with re-aimed velocity and corrected position
        """
        relative_hit = (self._x - paddle_center_x) / (paddle_width / 2)
        return Ball(
            self._config,
            self._x,
            paddle_top - self._config.radius,
            relative_hit * aim_speed,
            -abs(self._dy),
        )

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        return (
            self._x - self._config.radius,
            self._y - self._config.radius,
            self._x + self._config.radius,
            self._y + self._config.radius,
        )

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.2f}, y={self._y:.2f}, "
                f"dx={self._dx:.2f}, dy={self._dy:.2f})")
