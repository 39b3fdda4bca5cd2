"""Mapping from physical keys to game input events."""

from __future__ import annotations

import enum

from classic_snake.snake import Direction


class InputEvent(enum.Enum):
    """Discrete intents understood by the game controller."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_PAUSE = "toggle_pause"
    NEW_GAME = "new_game"

    @property
    def direction(self) -> Direction | None:
        return _EVENT_DIRECTIONS.get(self)


_EVENT_DIRECTIONS: dict[InputEvent, Direction] = {
    InputEvent.UP: Direction.UP,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
    InputEvent.RIGHT: Direction.RIGHT,
}

# Keys are compared case-insensitively.
KEY_BINDINGS: dict[str, InputEvent] = {
    "arrowup": InputEvent.UP,
    "up": InputEvent.UP,
    "w": InputEvent.UP,
    "arrowdown": InputEvent.DOWN,
    "down": InputEvent.DOWN,
    "s": InputEvent.DOWN,
    "arrowleft": InputEvent.LEFT,
    "left": InputEvent.LEFT,
    "a": InputEvent.LEFT,
    "arrowright": InputEvent.RIGHT,
    "right": InputEvent.RIGHT,
    "d": InputEvent.RIGHT,
    "space": InputEvent.TOGGLE_PAUSE,
    " ": InputEvent.TOGGLE_PAUSE,
    "p": InputEvent.TOGGLE_PAUSE,
    "return": InputEvent.NEW_GAME,
    "enter": InputEvent.NEW_GAME,
    "r": InputEvent.NEW_GAME,
}


def map_key(key: str) -> InputEvent | None:
    """Translate a key name into an :class:`InputEvent`, or ``None``."""
    return KEY_BINDINGS.get(key.lower())
