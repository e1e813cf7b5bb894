"""GameState enum for a Breakout session.

PLAYING is the only non-terminal state. Once a session reaches WON or
LOST, ticks stop mutating it until the game is reset.
"""
from enum import Enum


class GameState(Enum):
    """Session phases.

    States:
        PLAYING: Active gameplay in progress
        WON: Every brick destroyed
        LOST: Ball fell past the paddle
    """
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        """True for WON and LOST."""
        return self is not GameState.PLAYING
