"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

from classic_snake.grid import Position


class Axis(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(enum.Enum):
    """Cardinal movement directions with (col_delta, row_delta) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def axis(self) -> Axis:
        dx, _ = self.value
        return Axis.HORIZONTAL if dx else Axis.VERTICAL


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. :meth:`advance` is the
    only mutator; callers validate moves before applying them.
    """

    def __init__(self, head: Position, length: int = 3) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        col, row = head
        # Body trails to the left of the head so the snake starts moving right.
        self.body: deque[Position] = deque(
            Position(col - i, row) for i in range(length)
        )

    @classmethod
    def from_segments(cls, segments: list[tuple[int, int]]) -> Snake:
        """Build a snake from explicit (col, row) segments, head first."""
        if not segments:
            raise ValueError("Snake length must be at least 1.")
        snake = cls.__new__(cls)
        snake.body = deque(Position(c, r) for c, r in segments)
        return snake

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def proposed_head(self, direction: Direction) -> Position:
        """Compute the next head position without moving."""
        dx, dy = direction.value
        col, row = self.head
        return Position(col + dx, row + dy)

    def advance(self, new_head: Position, grow: bool = False) -> None:
        """Move the snake so that *new_head* becomes the head.

        The tail is dropped unless the snake grows this step.
        """
        self.body.appendleft(Position(*new_head))
        if not grow:
            self.body.pop()

    def occupies(self, pos: Position) -> bool:
        """Check whether the snake occupies a given cell."""
        return pos in self.body

    def segments(self) -> tuple[Position, ...]:
        return tuple(self.body)
