"""Classic Snake — core game engine."""

from classic_snake.collision import Collision
from classic_snake.config import GameConfig
from classic_snake.controller import GameController, GameState, Snapshot
from classic_snake.food import FOOD_TABLE, FoodLevel, current_food
from classic_snake.grid import Grid, Position
from classic_snake.inputs import InputEvent, map_key
from classic_snake.persistence import JsonHighScoreStore, MemoryHighScoreStore
from classic_snake.snake import Direction, Snake
from classic_snake.ticker import AsyncioTicker, FrameClockTicker, ManualTicker

__all__ = [
    "FOOD_TABLE",
    "AsyncioTicker",
    "Collision",
    "Direction",
    "FoodLevel",
    "FrameClockTicker",
    "GameConfig",
    "GameController",
    "GameState",
    "Grid",
    "InputEvent",
    "JsonHighScoreStore",
    "ManualTicker",
    "MemoryHighScoreStore",
    "Position",
    "Snake",
    "Snapshot",
    "current_food",
    "map_key",
]
