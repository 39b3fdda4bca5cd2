"""Grid model for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class Position(NamedTuple):
    """A cell coordinate as (column, row), 0-indexed from the top-left."""

    col: int
    row: int


class CellType(enum.IntEnum):
    """Integer codes stored in a painted grid array."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    PELLET = 3


class Grid:
    """Fixed-size playing field.

    The grid itself holds no game state; it answers bounds queries and can
    paint a snapshot into a NumPy array for renderers. Array indexing is
    ``cells[row, col]`` while positions are ``(col, row)``.
    """

    def __init__(self, width: int = 20, height: int = 20) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a coordinate lies within the grid."""
        col, row = pos
        return 0 <= col < self.width and 0 <= row < self.height

    def start_position(self) -> Position:
        """Default head cell for a new snake: centre row, left of centre."""
        return Position(self.width // 2 - 1, self.height // 2)

    def paint(
        self,
        snake: Iterable[Position],
        pellet: Position | None = None,
    ) -> np.ndarray:
        """Return a ``(height, width)`` array of :class:`CellType` codes."""
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        if pellet is not None and self.in_bounds(pellet):
            cells[pellet.row, pellet.col] = CellType.PELLET
        for i, (col, row) in enumerate(snake):
            if not self.in_bounds(Position(col, row)):
                continue
            cells[row, col] = CellType.HEAD if i == 0 else CellType.SNAKE
        return cells
