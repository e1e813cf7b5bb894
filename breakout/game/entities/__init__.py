"""Breakout game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig, sample_launch_angle
from .brick import Brick, BrickGrid, BrickState, GridConfig

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig', 'sample_launch_angle',
    'Brick', 'BrickGrid', 'BrickState', 'GridConfig',
]
