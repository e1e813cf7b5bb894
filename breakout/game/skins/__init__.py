"""Breakout visual skins.

GeometricSkin needs pygame and is imported from
``breakout.game.skins.geometric`` directly.
"""

from .base import BreakoutSkin, NullSkin

__all__ = ['BreakoutSkin', 'NullSkin']
