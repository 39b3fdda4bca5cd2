"""Pellet placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from classic_snake.grid import Position

if TYPE_CHECKING:
    from classic_snake.grid import Grid
    from classic_snake.snake import Snake

logger = logging.getLogger(__name__)


def spawn_pellet(
    snake: Snake,
    grid: Grid,
    rng: np.random.Generator | None = None,
) -> Position | None:
    """Pick a uniformly random cell not occupied by *snake*.

    Uses rejection sampling, which stays cheap while the snake covers a small
    share of the grid. Returns ``None`` when the snake fills every cell.
    """
    if rng is None:
        rng = np.random.default_rng()
    if len(set(snake.body)) >= grid.cell_count:
        logger.warning("No empty cells available for pellet spawning.")
        return None

    attempts = 0
    while True:
        attempts += 1
        col = int(rng.integers(0, grid.width))
        row = int(rng.integers(0, grid.height))
        pos = Position(col, row)
        if not snake.occupies(pos):
            if attempts > 1:
                logger.debug("Pellet placed after %d samples.", attempts)
            return pos
