"""Wall and self-intersection checks for a candidate head cell."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from classic_snake.grid import Grid, Position
    from classic_snake.snake import Snake


class Collision(enum.Enum):
    """Outcome of checking a proposed move."""

    OK = "ok"
    WALL = "wall"
    SELF = "self"


def check(
    candidate: Position,
    snake: Snake,
    grid: Grid,
    solid_tail: bool = True,
) -> Collision:
    """Classify moving the head of *snake* onto *candidate*.

    The check runs against the pre-move body. With ``solid_tail`` the current
    tail cell counts as occupied even though a non-growing move would vacate
    it; without it the tail is ignored.
    """
    if not grid.in_bounds(candidate):
        return Collision.WALL
    if snake.occupies(candidate):
        if solid_tail or candidate != snake.tail:
            return Collision.SELF
    return Collision.OK
