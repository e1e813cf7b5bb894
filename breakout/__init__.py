"""Breakout - a single-screen brick-breaking arcade game.

Provides:
- game_mode: BreakoutGame, the per-tick simulation and win/loss state machine
- game: entities (ball, paddle, brick grid), collision physics, skins
- scoring: current/best score tracking and best-score stores
- scheduler: repeating tick scheduling
- input: keyboard adapter for latched paddle movement
- config: constants and the validated GameConfig
"""

from breakout.config import GameConfig, ConfigError, load_config
from breakout.game_state import GameState
from breakout.game_mode import BreakoutGame
from breakout.scoring import ScoreStore, JsonScoreStore, MemoryScoreStore, ScoreTracker
from breakout.scheduler import Scheduler, IntervalScheduler, ManualScheduler

__version__ = "1.0.0"

__all__ = [
    'GameConfig',
    'ConfigError',
    'load_config',
    'GameState',
    'BreakoutGame',
    'ScoreStore',
    'JsonScoreStore',
    'MemoryScoreStore',
    'ScoreTracker',
    'Scheduler',
    'IntervalScheduler',
    'ManualScheduler',
]
