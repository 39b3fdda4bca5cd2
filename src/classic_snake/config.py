"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

GRID_SIZE = 20
CELL_SIZE = 20  # pixels, presentation only
INITIAL_SNAKE_LENGTH = 3
TICK_INTERVAL_MS = 150
HIGH_SCORE_FILE = "~/.classic_snake/high_score.json"

_INT_FIELDS = ("grid_size", "cell_size", "initial_length", "tick_interval_ms")


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for a game session.

    Supports JSON serialization so a session can be reproduced.
    """

    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    initial_length: int = INITIAL_SNAKE_LENGTH
    tick_interval_ms: int = TICK_INTERVAL_MS

    # Whether moving into the cell the tail is about to vacate is fatal.
    solid_tail: bool = True

    seed: int | None = None
    high_score_path: str = HIGH_SCORE_FILE

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly.
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}.")
        if self.seed is not None and (
            not isinstance(self.seed, int) or isinstance(self.seed, bool)
        ):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}.")
        if not isinstance(self.solid_tail, bool):
            raise ValueError(f"solid_tail must be a boolean, got {self.solid_tail!r}.")
        if not isinstance(self.high_score_path, str):
            raise ValueError("high_score_path must be a string.")
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        # The body trails left of the start head at column grid_size // 2 - 1.
        if self.initial_length > self.grid_size // 2:
            raise ValueError(
                "initial_length does not fit the configured grid; increase "
                "grid_size or reduce initial_length."
            )

    @property
    def window_size(self) -> int:
        return self.grid_size * self.cell_size

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object.")
        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}.")
        return cls(**raw)
