"""Game controller: the tick-driven state machine composing the game parts."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from classic_snake.collision import Collision
from classic_snake.collision import check as check_collision
from classic_snake.config import GameConfig
from classic_snake.food import FOOD_TABLE, FoodLevel, current_food, validate_table
from classic_snake.grid import Grid, Position
from classic_snake.inputs import InputEvent
from classic_snake.persistence import HighScoreStore, MemoryHighScoreStore
from classic_snake.snake import Direction, Snake
from classic_snake.spawner import spawn_pellet
from classic_snake.ticker import ManualTicker, TickSource

logger = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    """Lifecycle states of a game session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the game handed to render sinks."""

    snake: tuple[Position, ...]
    pellet: Position | None
    score: int
    high_score: int
    food_level: FoodLevel
    state: GameState
    direction: Direction
    ticks: int
    collision: Collision | None = None

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "pellet": list(self.pellet) if self.pellet is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "food_level": self.food_level.to_dict(),
            "state": self.state.value,
            "direction": self.direction.name.lower(),
            "ticks": self.ticks,
            "collision": self.collision.value if self.collision else None,
        }


RenderSink = Callable[[Snapshot], None]


class GameController:
    """Single-snake, tick-driven game controller.

    The controller owns the snake, pellet, score, and state. All mutation
    goes through :meth:`new_game`, :meth:`tick`,
    :meth:`set_pending_direction`, and :meth:`toggle_pause`; calls made in a
    state where they do not apply are ignored.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        ticker: TickSource | None = None,
        store: HighScoreStore | None = None,
        food_table: Sequence[FoodLevel] = FOOD_TABLE,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        validate_table(food_table)
        self.food_table = tuple(food_table)
        self.grid = Grid(self.config.grid_size, self.config.grid_size)
        self.ticker = ticker if ticker is not None else ManualTicker()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.snake = Snake(self.grid.start_position(), self.config.initial_length)
        self.pellet: Position | None = None
        self.direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self.score = 0
        self.high_score = self.store.load_high_score()
        self.food_level = current_food(0, self.food_table)
        self.state = GameState.IDLE
        self.ticks = 0
        self.last_collision: Collision | None = None
        self._sinks: list[RenderSink] = []

    # --- render sinks ---------------------------------------------------

    def subscribe(self, sink: RenderSink) -> None:
        """Register a callable that receives every emitted snapshot."""
        self._sinks.append(sink)

    def unsubscribe(self, sink: RenderSink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake.segments(),
            pellet=self.pellet,
            score=self.score,
            high_score=self.high_score,
            food_level=self.food_level,
            state=self.state,
            direction=self.direction,
            ticks=self.ticks,
            collision=self.last_collision,
        )

    def _emit(self) -> Snapshot:
        snap = self.snapshot()
        for sink in list(self._sinks):
            sink(snap)
        return snap

    # --- transitions ----------------------------------------------------

    @property
    def pending_direction(self) -> Direction:
        return self._pending_direction

    def new_game(self) -> Snapshot:
        """Reset the board and start ticking. Valid from any state."""
        self.ticker.stop()
        self.snake = Snake(self.grid.start_position(), self.config.initial_length)
        self.direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self.score = 0
        self.food_level = current_food(0, self.food_table)
        self.ticks = 0
        self.last_collision = None
        self.pellet = spawn_pellet(self.snake, self.grid, self.rng)
        self.state = GameState.RUNNING
        self.ticker.start(self.tick, self.config.tick_interval_ms)
        logger.info("New game started (high score %d).", self.high_score)
        return self._emit()

    def set_pending_direction(self, direction: Direction) -> bool:
        """Buffer a turn for the next tick.

        Only turns are accepted: a direction on the same axis as the
        committed one (forward repeat or reversal) is ignored. Returns whether
        the request was accepted.
        """
        if self.state != GameState.RUNNING:
            return False
        if direction.axis == self.direction.axis:
            return False
        self._pending_direction = direction
        return True

    def toggle_pause(self) -> Snapshot | None:
        """Flip between running and paused; ignored in other states."""
        if self.state == GameState.RUNNING:
            self.state = GameState.PAUSED
            self.ticker.stop()
        elif self.state == GameState.PAUSED:
            self.state = GameState.RUNNING
            self.ticker.start(self.tick, self.config.tick_interval_ms)
        else:
            return None
        logger.debug("Game %s at tick %d.", self.state.value, self.ticks)
        return self._emit()

    def tick(self) -> Snapshot | None:
        """Advance the game by one step. Ignored unless running."""
        if self.state != GameState.RUNNING:
            return None

        self.direction = self._pending_direction
        candidate = self.snake.proposed_head(self.direction)

        outcome = check_collision(
            candidate, self.snake, self.grid, solid_tail=self.config.solid_tail,
        )
        if outcome is not Collision.OK:
            self._game_over(outcome)
            return self._emit()

        grow = candidate == self.pellet
        self.snake.advance(candidate, grow=grow)
        self.ticks += 1

        if grow:
            self.score += 1
            self.food_level = current_food(self.score, self.food_table)
            if self.score > self.high_score:
                self.high_score = self.score
                self.store.save_high_score(self.high_score)
            self.pellet = spawn_pellet(self.snake, self.grid, self.rng)

        return self._emit()

    def handle_input(self, event: InputEvent) -> None:
        """Dispatch a discrete input event to the matching transition."""
        if event is InputEvent.NEW_GAME:
            self.new_game()
        elif event is InputEvent.TOGGLE_PAUSE:
            self.toggle_pause()
        elif event.direction is not None:
            self.set_pending_direction(event.direction)

    def _game_over(self, outcome: Collision) -> None:
        self.ticker.stop()
        self.state = GameState.GAME_OVER
        self.last_collision = outcome
        logger.info(
            "Snake hit %s at tick %d with score %d.",
            outcome.value, self.ticks, self.score,
        )
