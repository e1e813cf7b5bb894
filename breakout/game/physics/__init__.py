"""Breakout physics and collision detection."""

from .collision import (
    check_wall_collision,
    check_paddle_collision,
    check_brick_collision,
    is_horizontal_hit,
    resolve_brick_collision,
    resolve_paddle_collision,
)

__all__ = [
    'check_wall_collision',
    'check_paddle_collision',
    'check_brick_collision',
    'is_horizontal_hit',
    'resolve_brick_collision',
    'resolve_paddle_collision',
]
