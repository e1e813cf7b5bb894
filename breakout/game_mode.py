"""Breakout - one session of the classic brick-breaking game.

The game owns the simulation state (ball, paddle, brick grid, score,
phase) and delegates everything else to collaborators:

- skin: draws each frame and the terminal message
- score store: reads and writes the best score
- scheduler: calls tick() at a fixed interval until the session ends

Per tick, in order: lay out and draw the frame, resolve brick hits, bounce
off walls, check for a lost ball, resolve a paddle hit, move the paddle,
integrate the ball.
"""

import random
from typing import Any, Dict, Optional

from .config import GameConfig
from .game.entities.ball import Ball
from .game.entities.brick import BrickGrid
from .game.entities.paddle import Paddle
from .game.physics.collision import (
    check_wall_collision,
    check_brick_collision,
    check_paddle_collision,
    resolve_brick_collision,
    resolve_paddle_collision,
)
from .game.skins.base import BreakoutSkin, NullSkin
from .game_state import GameState
from .logging import emit_record, get_logger
from .scheduler import ScheduleHandle, Scheduler
from .scoring import MemoryScoreStore, ScoreData, ScoreStore, ScoreTracker

log = get_logger('game_mode')


class BreakoutGame:
    """A Breakout session and its tick function.

    Example:
        >>> from breakout.scheduler import ManualScheduler
        >>> game = BreakoutGame(scheduler=ManualScheduler())
        >>> game.start()
        >>> game.set_moving_right(True)
        >>> game.tick()
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        skin: Optional[BreakoutSkin] = None,
        score_store: Optional[ScoreStore] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize a new session.

        Args:
            config: Game configuration (defaults to GameConfig())
            skin: Render collaborator (defaults to NullSkin)
            score_store: Best-score persistence (defaults to in-memory)
            scheduler: Tick scheduler; start() requires one
            rng: Random source for the launch angle
        """
        self._config = config or GameConfig()
        self._skin = skin or NullSkin()
        self._store = score_store or MemoryScoreStore()
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._handle: Optional[ScheduleHandle] = None
        self._started = False
        self._session = 0

        self._init_session()

    def _init_session(self) -> None:
        """Build fresh entities, score and phase."""
        config = self._config
        self._session += 1
        self._state = GameState.PLAYING
        self._tick_count = 0

        self._grid = BrickGrid(config.grid_config())
        self._paddle = Paddle(config.paddle_config(), config.arena_width, config.arena_height)
        self._ball = Ball.initial_launch(
            config.ball_config(),
            config.arena_width,
            self._paddle.y,
            self._paddle.height,
            self._rng,
        )
        self._score = ScoreTracker(ScoreData(best=self._store.get_best_score()))

        log.info(
            "Session %d: %dx%d bricks, ball %s",
            self._session, self._grid.columns, self._grid.rows, self._ball,
        )

    # -- Properties --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def paddle(self) -> Paddle:
        return self._paddle

    @property
    def grid(self) -> BrickGrid:
        return self._grid

    @property
    def score(self) -> int:
        return self._score.current

    @property
    def best_score(self) -> int:
        return self._score.best

    @property
    def tick_count(self) -> int:
        """Ticks that advanced the simulation this session."""
        return self._tick_count

    @property
    def is_running(self) -> bool:
        """True while a tick schedule is active."""
        return self._handle is not None

    @property
    def skin(self) -> BreakoutSkin:
        return self._skin

    def place_ball(self, ball: Ball) -> None:
        """Replace the ball, e.g. to set up a scenario."""
        self._ball = ball

    # -- Input collaborator --

    def set_moving_left(self, pressed: bool) -> None:
        self._paddle.set_moving_left(pressed)

    def set_moving_right(self, pressed: bool) -> None:
        self._paddle.set_moving_right(pressed)

    # -- Scheduling --

    def start(self) -> None:
        """Schedule tick() at the configured interval.

        Does nothing if already running or if the session is over.

        Raises:
            RuntimeError: If the game has no scheduler
        """
        if self._scheduler is None:
            raise RuntimeError("BreakoutGame.start() needs a scheduler")
        self._started = True
        if self._handle is not None or self._state.is_terminal:
            return
        self._handle = self._scheduler.schedule_repeating(
            self.tick, self._config.tick_interval_ms
        )

    def stop(self) -> None:
        """Cancel the tick schedule, if any."""
        if self._handle is not None and self._scheduler is not None:
            self._scheduler.cancel(self._handle)
        self._handle = None

    def reset(self) -> None:
        """Restart: throw the session away and begin a new one.

        Equivalent to starting the program again; the best score is
        re-read from the store. Restarts the schedule if the game was
        started before.
        """
        self.stop()
        self._skin.reset()
        self._init_session()
        if self._started:
            self.start()

    # -- Tick --

    def tick(self) -> None:
        """Advance the simulation by one step. No-op once the session is over."""
        if self._state.is_terminal:
            return

        self._tick_count += 1
        self._render()

        if self._handle_brick_collisions():
            return

        self._ball, fell_below = check_wall_collision(
            self._ball,
            self._config.arena_width,
            self._config.arena_height,
        )

        if fell_below:
            self._finish(GameState.LOST)
            return

        if check_paddle_collision(self._ball, self._paddle):
            self._ball = resolve_paddle_collision(self._ball, self._paddle)
            log.debug("Paddle hit, ball now %s", self._ball)

        self._paddle.update()
        self._ball = self._ball.integrate()

    def _render(self) -> None:
        """Lay out the bricks and draw the current frame."""
        self._grid.layout()
        self._skin.clear_frame()
        self._skin.draw_ball(self._ball)
        self._skin.draw_bricks(self._grid)
        self._skin.draw_paddle(self._paddle)
        self._skin.draw_scores(self._score.current, self._score.best)

    def _handle_brick_collisions(self) -> bool:
        """Check every alive brick against the ball.

        More than one brick can be hit in the same pass.

        Returns:
            True if the last brick fell and the session is won
        """
        for col, row, brick in self._grid:
            if not check_brick_collision(self._ball, brick):
                continue

            self._ball = resolve_brick_collision(self._ball, brick)
            self._grid.destroy(col, row)
            self._score = self._score.record_brick()
            log.debug("Brick (%d, %d) destroyed, score %d", col, row, self._score.current)

            if self._score.current == self._grid.total:
                self._finish(GameState.WON)
                return True
        return False

    def _finish(self, outcome: GameState) -> None:
        """Enter a terminal state: stop ticking, show the message, save the best."""
        self._state = outcome
        self.stop()

        self._skin.clear_frame()
        self._skin.draw_terminal_message(outcome, self._score.current)

        previous_best = self._score.best
        self._score = self._score.finalize()
        if self._score.best > previous_best:
            self._store.set_best_score(self._score.best)
            log.info("New best score %d (was %d)", self._score.best, previous_best)

        log.info(
            "Session %d %s after %d ticks with score %d",
            self._session, outcome.value, self._tick_count, self._score.current,
        )
        emit_record('session', {
            'type': 'terminal',
            'session': self._session,
            'outcome': outcome.value,
            'score': self._score.current,
            'best': self._score.best,
            'ticks': self._tick_count,
        })

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict view of the session for debugging and tests."""
        return {
            'session': self._session,
            'state': self._state.value,
            'tick': self._tick_count,
            'score': self._score.current,
            'best': self._score.best,
            'ball': {
                'x': self._ball.x, 'y': self._ball.y,
                'dx': self._ball.dx, 'dy': self._ball.dy,
            },
            'paddle': {'x': self._paddle.x, 'y': self._paddle.y},
            'bricks_alive': self._grid.alive_count(),
        }
