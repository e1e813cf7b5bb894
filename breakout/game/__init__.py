"""Breakout game internals: entities, physics, and skins."""
