"""
Keyboard Input - latches left/right movement from key transitions.

Arrow keys are recognized under both their modern and legacy names
("ArrowRight" and "Right"), as well as pygame's key constants.
"""
from typing import Optional, Protocol

import pygame


class DirectionalTarget(Protocol):
    """Anything that accepts latched left/right input (the game, a paddle)."""

    def set_moving_left(self, pressed: bool) -> None: ...

    def set_moving_right(self, pressed: bool) -> None: ...


RIGHT_KEY_NAMES = frozenset({'right', 'arrowright'})
LEFT_KEY_NAMES = frozenset({'left', 'arrowleft'})

_PYGAME_KEYS = {
    pygame.K_RIGHT: 'right',
    pygame.K_LEFT: 'left',
}


def direction_for_key(name: str) -> Optional[str]:
    """Map a key name to 'left', 'right', or None.

    Matching is case-insensitive.
    """
    key = name.lower()
    if key in RIGHT_KEY_NAMES:
        return 'right'
    if key in LEFT_KEY_NAMES:
        return 'left'
    return None


class KeyboardInput:
    """Translates key press/release into set_moving_left/right calls."""

    def __init__(self, target: DirectionalTarget):
        """Initialize keyboard input.

        Args:
            target: Receiver of the latched directions
        """
        self._target = target

    @property
    def target(self) -> DirectionalTarget:
        return self._target

    def retarget(self, target: DirectionalTarget) -> None:
        self._target = target

    def handle_key(self, name: str, pressed: bool) -> bool:
        """Apply a key transition by name.

        Args:
            name: Key name, e.g. "ArrowLeft" or "Right"
            pressed: True on press, False on release

        Returns:
            True if the key is a movement key
        """
        direction = direction_for_key(name)
        if direction == 'right':
            self._target.set_moving_right(pressed)
        elif direction == 'left':
            self._target.set_moving_left(pressed)
        else:
            return False
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply a pygame KEYDOWN/KEYUP event.

        Returns:
            True if the event was a movement key transition
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False
        name = _PYGAME_KEYS.get(event.key)
        if name is None:
            return False
        return self.handle_key(name, event.type == pygame.KEYDOWN)
