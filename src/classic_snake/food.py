"""Score-indexed food progression table."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FoodLevel:
    """A food tier unlocked once the score reaches ``min_score``."""

    min_score: int
    identifier: str
    icon: str = ""

    def to_dict(self) -> dict:
        return {
            "min_score": self.min_score,
            "identifier": self.identifier,
            "icon": self.icon,
        }


FOOD_TABLE: tuple[FoodLevel, ...] = (
    FoodLevel(0, "Worm", "🪱"),
    FoodLevel(3, "Cricket", "🦗"),
    FoodLevel(6, "Snail", "🐌"),
    FoodLevel(9, "Frog", "🐸"),
)


def validate_table(table: Sequence[FoodLevel]) -> None:
    """Raise ``ValueError`` unless *table* is non-empty, ascending, and starts at 0."""
    if not table:
        raise ValueError("Food table must contain at least one level.")
    if table[0].min_score != 0:
        raise ValueError("First food level must have min_score 0.")
    for prev, cur in zip(table, table[1:]):
        if cur.min_score <= prev.min_score:
            raise ValueError(
                "Food table must be strictly ascending by min_score "
                f"({prev.identifier!r} -> {cur.identifier!r})."
            )


def current_food(
    score: int, table: Sequence[FoodLevel] = FOOD_TABLE,
) -> FoodLevel:
    """Return the highest food level whose threshold ``score`` has reached."""
    for level in reversed(table):
        if level.min_score <= score:
            return level
    return table[0]
