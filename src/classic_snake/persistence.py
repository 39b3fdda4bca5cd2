"""High-score persistence adapters."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    """Port the controller uses to load and save the best score."""

    def load_high_score(self) -> int: ...

    def save_high_score(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score in process memory."""

    def __init__(self, initial: int = 0) -> None:
        self.value = initial
        self.saves = 0

    def load_high_score(self) -> int:
        return self.value

    def save_high_score(self, score: int) -> None:
        self.value = score
        self.saves += 1


class JsonHighScoreStore:
    """Stores the high score as ``{"high_score": n}`` in a JSON file.

    Reads never fail: a missing, unreadable, or malformed file yields 0.
    Write failures are logged and otherwise ignored.
    """

    KEY = "high_score"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def load_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            raw = json.loads(self.path.read_text())
        except (OSError, ValueError):
            logger.warning("Could not read high score from %s.", self.path)
            return 0
        value = raw.get(self.KEY) if isinstance(raw, dict) else None
        # bool is an int subclass; reject it along with negatives.
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            logger.warning("Ignoring malformed high score in %s.", self.path)
            return 0
        return value

    def save_high_score(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({self.KEY: score}))
        except OSError:
            logger.warning("Could not save high score to %s.", self.path)
            return
        logger.debug("High score %d saved to %s.", score, self.path)

    def reset(self) -> None:
        """Delete the stored high score, if any."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not remove %s.", self.path)
