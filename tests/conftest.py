"""Shared fixtures for Breakout tests."""
import os
import random

# Headless pygame for skin and input tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from breakout import logging as breakout_logging
from breakout.config import GameConfig
from breakout.game_mode import BreakoutGame
from breakout.scheduler import ManualScheduler
from breakout.scoring import MemoryScoreStore


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence log output and restore logging config after each test."""
    saved_level = breakout_logging._config['default_level']
    saved_modules = dict(breakout_logging._config['module_levels'])
    saved_dir = breakout_logging._config['log_dir']
    saved_streams = set(breakout_logging._config['enabled_streams'])
    breakout_logging.disable_logging()
    yield
    breakout_logging.close_all_sinks()
    breakout_logging._config['default_level'] = saved_level
    breakout_logging._config['module_levels'] = saved_modules
    breakout_logging._config['log_dir'] = saved_dir
    breakout_logging._config['enabled_streams'] = saved_streams


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def game(config, scheduler, store):
    """Default 10x4 game with a seeded launch angle."""
    return BreakoutGame(
        config=config,
        score_store=store,
        scheduler=scheduler,
        rng=random.Random(1234),
    )
