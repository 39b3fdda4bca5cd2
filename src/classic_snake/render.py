"""Plain-text rendering of game snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from classic_snake.grid import CellType

if TYPE_CHECKING:
    from classic_snake.controller import Snapshot
    from classic_snake.grid import Grid

_GLYPHS: dict[int, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "o",
    CellType.HEAD: "@",
    CellType.PELLET: "*",
}


def status_line(snapshot: Snapshot) -> str:
    level = snapshot.food_level
    return (
        f"score {snapshot.score}  best {snapshot.high_score}  "
        f"food {level.identifier}  [{snapshot.state.value}]"
    )


def render_text(snapshot: Snapshot, grid: Grid) -> str:
    """Return the board as rows of glyphs followed by a status line."""
    cells = grid.paint(snapshot.snake, snapshot.pellet)
    rows = ["".join(_GLYPHS[int(c)] for c in row) for row in cells]
    rows.append(status_line(snapshot))
    return "\n".join(rows)
