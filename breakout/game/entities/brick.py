"""Brick entity and the brick grid.

The grid is fixed at ``columns x rows`` for the whole session. Bricks start
at placeholder geometry; ``BrickGrid.layout()`` assigns their positions
from the grid index every frame.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple


class BrickState(Enum):
    """Brick lifecycle states."""

    ALIVE = "alive"
    DESTROYED = "destroyed"


@dataclass(frozen=True)
class GridConfig:
    """Brick grid dimensions and spacing."""

    columns: int = 10
    rows: int = 4
    brick_width: float = 135.0
    brick_height: float = 50.0
    padding: float = 7.0
    offset_top: float = 120.0
    offset_left: float = 5.0


class Brick:
    """A single brick. Position is the top-left corner."""

    def __init__(
        self,
        width: float,
        height: float,
        x: float = 0.0,
        y: float = 0.0,
        state: BrickState = BrickState.ALIVE,
    ):
        """Initialize brick.

        Args:
            width: Brick width
            height: Brick height
            x: Left edge X position
            y: Top edge Y position
            state: Initial state
        """
        self._width = width
        self._height = height
        self._x = x
        self._y = y
        self._state = state

    @property
    def x(self) -> float:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def state(self) -> BrickState:
        return self._state

    @property
    def is_alive(self) -> bool:
        """Check if brick can still be hit."""
        return self._state == BrickState.ALIVE

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (
            self._x,
            self._y,
            self._x + self._width,
            self._y + self._height,
        )

    def moved_to(self, x: float, y: float) -> 'Brick':
        """Return a copy of this brick at a new position."""
        return Brick(self._width, self._height, x, y, self._state)

    def destroy(self) -> 'Brick':
        """Return a destroyed copy of this brick, keeping its geometry."""
        return Brick(self._width, self._height, self._x, self._y, BrickState.DESTROYED)

    def __repr__(self) -> str:
        return f"Brick(x={self._x:.1f}, y={self._y:.1f}, state={self._state.value})"


class BrickGrid:
    """Fixed-size grid of bricks indexed by (column, row)."""

    def __init__(self, config: GridConfig):
        self._config = config
        self._cells: List[List[Brick]] = [
            [Brick(config.brick_width, config.brick_height) for _ in range(config.rows)]
            for _ in range(config.columns)
        ]

    @classmethod
    def create(cls, columns: int, rows: int, **spacing) -> 'BrickGrid':
        """Create a grid with every brick alive at placeholder geometry.

        Args:
            columns: Number of columns
            rows: Number of rows
            **spacing: Other GridConfig fields (brick_width, padding, ...)
        """
        return cls(GridConfig(columns=columns, rows=rows, **spacing))

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def columns(self) -> int:
        return self._config.columns

    @property
    def rows(self) -> int:
        return self._config.rows

    @property
    def total(self) -> int:
        """Number of bricks the grid started with."""
        return self._config.columns * self._config.rows

    def get(self, col: int, row: int) -> Brick:
        return self._cells[col][row]

    def position_for(self, col: int, row: int) -> Tuple[float, float]:
        """Top-left position of the brick at (col, row)."""
        c = self._config
        return (
            col * (c.brick_width + c.padding) + c.offset_left,
            row * (c.brick_height + c.padding) + c.offset_top,
        )

    def layout(self) -> None:
        """Assign every alive brick its position from its grid index.

        Destroyed bricks keep the geometry they had when destroyed.
        """
        for col, column in enumerate(self._cells):
            for row, brick in enumerate(column):
                if brick.is_alive:
                    x, y = self.position_for(col, row)
                    column[row] = brick.moved_to(x, y)

    def destroy(self, col: int, row: int) -> None:
        """Mark the brick at (col, row) destroyed. Caller checks aliveness."""
        self._cells[col][row] = self._cells[col][row].destroy()

    def all_destroyed(self) -> bool:
        return self.alive_count() == 0

    def alive_count(self) -> int:
        return sum(1 for _, _, brick in self if brick.is_alive)

    def __iter__(self) -> Iterator[Tuple[int, int, Brick]]:
        """Iterate (col, row, brick) in column-major order."""
        for col, column in enumerate(self._cells):
            for row, brick in enumerate(column):
                yield col, row, brick
