"""Configuration for Breakout.

Contains arena dimensions, physics constants, brick grid layout,
colors, and the validated GameConfig model that bundles them.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .game.entities.ball import BallConfig
from .game.entities.brick import GridConfig
from .game.entities.paddle import PaddleConfig
from .logging import get_logger

log = get_logger('config')

# Load .env from the package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment, keeping the default for bad values."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        log.warning("Ignoring %s=%r: not an integer, using %d", key, value, default)
        return default


# Arena dimensions
ARENA_WIDTH: int = _get_int('BREAKOUT_ARENA_WIDTH', 1425)
ARENA_HEIGHT: int = _get_int('BREAKOUT_ARENA_HEIGHT', 800)

# Timing
# Milliseconds between simulation ticks
TICK_INTERVAL_MS: int = _get_int('BREAKOUT_TICK_INTERVAL_MS', 10)
FRAME_RATE: int = 100        # Display loop frames per second

# Ball
BALL_RADIUS: float = 12.0
BALL_SPEED: float = 5.0      # Pixels per tick
BALL_LAUNCH_GAP: float = 20.0  # Gap between paddle top band and ball at launch

# Paddle
PADDLE_WIDTH: float = 230.0
PADDLE_HEIGHT: float = 20.0
PADDLE_STEP: float = 7.0     # Pixels per tick while a direction is held
PADDLE_BOTTOM_OFFSET: float = 40.0  # Paddle top sits this far above the arena bottom
PADDLE_AIM_SPEED: float = 5.0  # Horizontal speed at the paddle's edge

# Brick grid
BRICK_COLUMNS: int = 10
BRICK_ROWS: int = 4
BRICK_WIDTH: float = 135.0
BRICK_HEIGHT: float = 50.0
BRICK_PADDING: float = 7.0
BRICK_OFFSET_TOP: float = 120.0
BRICK_OFFSET_LEFT: float = 5.0

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (21, 22, 30)
BALL_COLOR: Tuple[int, int, int] = (217, 217, 217)
PADDLE_COLOR: Tuple[int, int, int] = (194, 45, 35)
SHADOW_COLOR: Tuple[int, int, int] = (21, 22, 30)
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
LOST_COLOR: Tuple[int, int, int] = (255, 0, 0)
WON_COLOR: Tuple[int, int, int] = (255, 215, 0)

BRICK_COLORS: Dict[str, Tuple[int, int, int]] = {
    'red': (255, 0, 0),
    'orange': (255, 165, 0),
    'green': (0, 128, 0),
    'yellow': (255, 255, 0),
}

# Row index (mod len) -> color name
BRICK_ROW_COLORS: List[str] = ['red', 'orange', 'green', 'yellow']


class ConfigError(ValueError):
    """Raised when a configuration file or value is invalid."""
    pass


class GameConfig(BaseModel):
    """Immutable, validated game configuration.

    Defaults reproduce the classic layout: a 10x4 brick wall, a wide
    paddle near the bottom and a ball moving 5 pixels per tick.

    Examples:
        >>> config = GameConfig()
        >>> config.brick_columns * config.brick_rows
        40
        >>> GameConfig(arena_width=800).arena_width
        800
    """
    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT
    tick_interval_ms: int = TICK_INTERVAL_MS

    ball_radius: float = BALL_RADIUS
    ball_speed: float = BALL_SPEED
    ball_launch_gap: float = BALL_LAUNCH_GAP

    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_step: float = PADDLE_STEP
    paddle_bottom_offset: float = PADDLE_BOTTOM_OFFSET
    paddle_aim_speed: float = PADDLE_AIM_SPEED

    brick_columns: int = BRICK_COLUMNS
    brick_rows: int = BRICK_ROWS
    brick_width: float = BRICK_WIDTH
    brick_height: float = BRICK_HEIGHT
    brick_padding: float = BRICK_PADDING
    brick_offset_top: float = BRICK_OFFSET_TOP
    brick_offset_left: float = BRICK_OFFSET_LEFT

    model_config = ConfigDict(frozen=True, extra='forbid')

    @field_validator(
        'arena_width', 'arena_height', 'tick_interval_ms',
        'ball_radius', 'ball_speed',
        'paddle_width', 'paddle_height', 'paddle_step',
        'brick_columns', 'brick_rows', 'brick_width', 'brick_height',
    )
    @classmethod
    def validate_positive(cls, v: Union[int, float]) -> Union[int, float]:
        """Validate sizes, counts and speeds are positive."""
        if v <= 0:
            raise ValueError(f'must be positive, got {v}')
        return v

    @field_validator(
        'ball_launch_gap', 'paddle_bottom_offset', 'paddle_aim_speed',
        'brick_padding', 'brick_offset_top', 'brick_offset_left',
    )
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Validate offsets and padding are non-negative."""
        if v < 0:
            raise ValueError(f'must be non-negative, got {v}')
        return v

    @model_validator(mode='after')
    def validate_fits_arena(self) -> 'GameConfig':
        """Validate the paddle and ball fit inside the arena."""
        if self.paddle_width > self.arena_width:
            raise ValueError(
                f'paddle_width {self.paddle_width} exceeds arena_width {self.arena_width}'
            )
        if self.ball_radius * 2 >= min(self.arena_width, self.arena_height):
            raise ValueError(f'ball_radius {self.ball_radius} does not fit the arena')
        if self.paddle_bottom_offset >= self.arena_height:
            raise ValueError(
                f'paddle_bottom_offset {self.paddle_bottom_offset} '
                f'exceeds arena_height {self.arena_height}'
            )
        return self

    @property
    def brick_count(self) -> int:
        """Total number of bricks in the grid."""
        return self.brick_columns * self.brick_rows

    def grid_config(self) -> GridConfig:
        """Brick grid settings for BrickGrid."""
        return GridConfig(
            columns=self.brick_columns,
            rows=self.brick_rows,
            brick_width=self.brick_width,
            brick_height=self.brick_height,
            padding=self.brick_padding,
            offset_top=self.brick_offset_top,
            offset_left=self.brick_offset_left,
        )

    def ball_config(self) -> BallConfig:
        """Ball settings for Ball."""
        return BallConfig(
            radius=self.ball_radius,
            speed=self.ball_speed,
            launch_gap=self.ball_launch_gap,
        )

    def paddle_config(self) -> PaddleConfig:
        """Paddle settings for Paddle."""
        return PaddleConfig(
            width=self.paddle_width,
            height=self.paddle_height,
            step=self.paddle_step,
            bottom_offset=self.paddle_bottom_offset,
            aim_speed=self.paddle_aim_speed,
        )

    def with_overrides(self, **overrides: Any) -> 'GameConfig':
        """Return a new validated config with non-None overrides applied.

        Args:
            **overrides: Field values to replace (None values are ignored)

        Returns:
            New GameConfig

        Raises:
            ConfigError: If the resulting config is invalid
        """
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return GameConfig(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration override: {e}") from e


def load_config(path: Optional[Union[str, Path]] = None) -> GameConfig:
    """Load a GameConfig from a YAML file.

    Keys in the file match GameConfig field names; anything missing keeps
    its default.

    Example YAML:
        arena_width: 1000
        brick_columns: 7
        ball_speed: 4

    Args:
        path: YAML file to load. None returns the defaults.

    Returns:
        Validated GameConfig

    Raises:
        ConfigError: If the file is missing, malformed, or fails validation
    """
    if path is None:
        return GameConfig()

    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    try:
        return GameConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
