#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    python -m breakout
    python -m breakout --config my_level.yaml
    python -m breakout --columns 6 --rows 3 --seed 42
"""

import argparse
import random
import sys
from typing import List, Optional

import pygame

from .config import ConfigError, FRAME_RATE, load_config
from .game.skins.geometric import GeometricSkin
from .game_mode import BreakoutGame
from .input.keyboard import KeyboardInput
from .logging import close_all_sinks, configure_logging, create_sink, get_logger, register_sink
from .scheduler import IntervalScheduler
from .scoring import JsonScoreStore

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Breakout - Standalone")

    parser.add_argument('--config', type=str, default=None, help='YAML config file')

    # Display options
    parser.add_argument('--width', type=int, default=None, help='Arena width')
    parser.add_argument('--height', type=int, default=None, help='Arena height')

    # Game options
    parser.add_argument('--columns', type=int, default=None, help='Brick columns')
    parser.add_argument('--rows', type=int, default=None, help='Brick rows')
    parser.add_argument('--seed', type=int, default=None, help='Launch angle seed')
    parser.add_argument('--scores-file', type=str, default=None,
                        help='Best score file (default: user data dir)')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Log level for all modules')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Breakout in a pygame window."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        config = load_config(args.config).with_overrides(
            arena_width=args.width,
            arena_height=args.height,
            brick_columns=args.columns,
            brick_rows=args.rows,
        )
    except ConfigError as e:
        log.error("%s", e)
        return 2

    register_sink('session', create_sink('session'))

    pygame.init()
    screen = pygame.display.set_mode((config.arena_width, config.arena_height))
    pygame.display.set_caption("Breakout")

    skin = GeometricSkin(screen)
    scheduler = IntervalScheduler(start_ms=pygame.time.get_ticks())
    game = BreakoutGame(
        config=config,
        skin=skin,
        score_store=JsonScoreStore(args.scores_file),
        scheduler=scheduler,
        rng=random.Random(args.seed),
    )
    keyboard = KeyboardInput(game)

    print("\n" + "=" * 50)
    print("BREAKOUT")
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right arrows to move the paddle")
    print("  - R or the Restart button to restart")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()
    game.start()
    running = True

    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    game.reset()
                    log.info("Game restarted")
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if game.state.is_terminal and skin.hit_restart_button(event.pos):
                        game.reset()
                        log.info("Game restarted")
                else:
                    keyboard.handle_event(event)

            scheduler.pump(pygame.time.get_ticks())
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        game.stop()
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
