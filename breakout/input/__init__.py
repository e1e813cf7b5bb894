"""Breakout input sources."""

from breakout.input.keyboard import KeyboardInput, DirectionalTarget, direction_for_key

__all__ = ['KeyboardInput', 'DirectionalTarget', 'direction_for_key']
