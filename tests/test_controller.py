"""Tests for the GameController state machine."""

import json

import pytest

from classic_snake.collision import Collision
from classic_snake.config import GameConfig
from classic_snake.controller import GameController, GameState
from classic_snake.food import FoodLevel
from classic_snake.grid import Position
from classic_snake.inputs import InputEvent
from classic_snake.persistence import MemoryHighScoreStore
from classic_snake.snake import Direction, Snake
from classic_snake.ticker import ManualTicker

FAR_AWAY = Position(0, 0)


def _controller(**config_kwargs):
    config = GameConfig(seed=0, **config_kwargs)
    sink: list = []
    controller = GameController(
        config, ticker=ManualTicker(), store=MemoryHighScoreStore(),
    )
    controller.subscribe(sink.append)
    return controller, sink


def _running(**config_kwargs):
    """A started game whose pellet is parked out of the snake's path."""
    controller, sink = _controller(**config_kwargs)
    controller.new_game()
    controller.pellet = FAR_AWAY
    sink.clear()
    return controller, sink


def _place(controller, segments, direction):
    controller.snake = Snake.from_segments(segments)
    controller.direction = direction
    controller._pending_direction = direction


class TestControllerInit:
    def test_starts_idle(self):
        controller, sink = _controller()
        assert controller.state is GameState.IDLE
        assert controller.score == 0
        assert controller.pellet is None
        assert not controller.ticker.running
        assert sink == []

    def test_loads_high_score(self):
        controller = GameController(store=MemoryHighScoreStore(initial=12))
        assert controller.high_score == 12

    def test_rejects_bad_food_table(self):
        with pytest.raises(ValueError):
            GameController(food_table=[FoodLevel(2, "Worm")])


class TestNewGame:
    def test_initial_layout(self):
        controller, sink = _controller()
        snap = controller.new_game()
        assert snap.snake == ((9, 10), (8, 10), (7, 10))
        assert snap.state is GameState.RUNNING
        assert snap.direction is Direction.RIGHT
        assert snap.food_level.identifier == "Worm"
        assert sink == [snap]

    def test_pellet_not_on_snake(self):
        controller, _ = _controller()
        controller.new_game()
        assert controller.pellet is not None
        assert not controller.snake.occupies(controller.pellet)

    def test_starts_ticker(self):
        controller, _ = _controller()
        controller.new_game()
        assert controller.ticker.running
        assert controller.ticker.interval_ms == 150

    def test_resets_after_game_over(self):
        controller, _ = _running()
        controller.score = 4
        _place(controller, [(19, 10), (18, 10), (17, 10)], Direction.RIGHT)
        controller.tick()
        assert controller.state is GameState.GAME_OVER

        controller.new_game()
        assert controller.state is GameState.RUNNING
        assert controller.score == 0
        assert controller.last_collision is None
        assert len(controller.snake) == 3

    def test_valid_while_paused(self):
        controller, _ = _running()
        controller.toggle_pause()
        controller.new_game()
        assert controller.state is GameState.RUNNING
        assert controller.ticker.running


class TestTick:
    def test_scenario_slide(self):
        controller, sink = _running()
        snap = controller.tick()
        assert snap.snake == ((10, 10), (9, 10), (8, 10))
        assert snap.score == 0
        assert snap.ticks == 1
        assert sink == [snap]

    def test_scenario_eat(self):
        controller, _ = _running()
        controller.pellet = Position(10, 10)
        snap = controller.tick()
        assert snap.snake == ((10, 10), (9, 10), (8, 10), (7, 10))
        assert snap.score == 1
        assert snap.pellet is not None
        assert snap.pellet != Position(10, 10)
        assert not controller.snake.occupies(snap.pellet)

    def test_scenario_wall(self):
        controller, sink = _running()
        _place(controller, [(19, 10), (18, 10), (17, 10)], Direction.RIGHT)
        snap = controller.tick()
        assert snap.state is GameState.GAME_OVER
        assert snap.collision is Collision.WALL
        assert snap.score == 0
        assert sink[-1].state is GameState.GAME_OVER
        assert not controller.ticker.running

    def test_wall_leaves_snake_unmodified(self):
        controller, _ = _running()
        _place(controller, [(0, 0), (1, 0), (2, 0)], Direction.LEFT)
        before = controller.snake.segments()
        controller.tick()
        assert controller.snake.segments() == before

    def test_final_score_reported(self):
        controller, sink = _running()
        controller.score = 7
        _place(controller, [(5, 0), (5, 1), (5, 2)], Direction.UP)
        controller.tick()
        assert sink[-1].score == 7

    def test_self_collision(self):
        controller, _ = _running()
        _place(
            controller,
            [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)],
            Direction.LEFT,
        )
        assert controller.set_pending_direction(Direction.DOWN)
        snap = controller.tick()
        assert snap.state is GameState.GAME_OVER
        assert snap.collision is Collision.SELF

    def test_tail_cell_is_fatal_by_default(self):
        controller, _ = _running()
        _place(controller, [(5, 5), (6, 5), (6, 6), (5, 6)], Direction.LEFT)
        controller.set_pending_direction(Direction.DOWN)
        assert controller.tick().state is GameState.GAME_OVER

    def test_tail_cell_allowed_when_lenient(self):
        controller, _ = _running(solid_tail=False)
        _place(controller, [(5, 5), (6, 5), (6, 6), (5, 6)], Direction.LEFT)
        controller.set_pending_direction(Direction.DOWN)
        snap = controller.tick()
        assert snap.state is GameState.RUNNING
        assert snap.snake == ((5, 6), (5, 5), (6, 5), (6, 6))

    def test_non_eating_tick_keeps_length(self):
        controller, _ = _running()
        for direction in [Direction.UP, Direction.LEFT, Direction.UP]:
            old_head = controller.snake.head
            controller.set_pending_direction(direction)
            controller.tick()
            dx, dy = direction.value
            assert controller.snake.head == (old_head.col + dx, old_head.row + dy)
            assert len(controller.snake) == 3

    def test_ignored_when_not_running(self):
        controller, sink = _controller()
        assert controller.tick() is None
        controller.new_game()
        controller.toggle_pause()
        sink.clear()
        assert controller.tick() is None
        assert sink == []
        assert controller.ticks == 0

    def test_ignored_after_game_over(self):
        controller, sink = _running()
        _place(controller, [(19, 10), (18, 10), (17, 10)], Direction.RIGHT)
        controller.tick()
        sink.clear()
        assert controller.tick() is None
        assert sink == []

    def test_driven_by_ticker(self):
        controller, _ = _running()
        assert controller.ticker.fire(3) == 3
        assert controller.snake.head == (12, 10)


class TestScoring:
    def test_food_level_advances(self):
        controller, _ = _running()
        controller.score = 2
        controller.pellet = Position(10, 10)
        snap = controller.tick()
        assert snap.score == 3
        assert snap.food_level.identifier == "Cricket"

    def test_high_score_saved_when_beaten(self):
        controller, _ = _running()
        controller.pellet = Position(10, 10)
        controller.tick()
        assert controller.high_score == 1
        assert controller.store.value == 1
        assert controller.store.saves == 1

    def test_high_score_not_saved_below_record(self):
        store = MemoryHighScoreStore(initial=5)
        controller = GameController(
            GameConfig(seed=0), ticker=ManualTicker(), store=store,
        )
        controller.new_game()
        controller.pellet = Position(10, 10)
        controller.tick()
        assert controller.high_score == 5
        assert store.saves == 0

    def test_high_score_survives_new_game(self):
        controller, _ = _running()
        controller.pellet = Position(10, 10)
        controller.tick()
        controller.new_game()
        assert controller.score == 0
        assert controller.high_score == 1

    def test_full_board_leaves_no_pellet(self):
        controller, _ = _running(grid_size=4, initial_length=1)
        cells = [(c, r) for r in range(4) for c in range(4)]
        cells.remove((3, 3))
        cells.remove((2, 3))
        # Head at (2, 2) moving down onto the pellet at (2, 3).
        cells.remove((2, 2))
        cells.insert(0, (2, 2))
        _place(controller, cells, Direction.DOWN)
        controller.pellet = Position(2, 3)
        snap = controller.tick()
        assert snap.score == 1
        assert snap.pellet == Position(3, 3)


class TestDirectionInput:
    def test_turn_accepted(self):
        controller, _ = _running()
        assert controller.set_pending_direction(Direction.UP)
        assert controller.pending_direction is Direction.UP

    @pytest.mark.parametrize("direction", [Direction.RIGHT, Direction.LEFT])
    def test_same_axis_rejected(self, direction):
        controller, _ = _running()
        assert not controller.set_pending_direction(direction)
        assert controller.pending_direction is Direction.RIGHT

    def test_latest_turn_wins(self):
        controller, _ = _running()
        controller.set_pending_direction(Direction.UP)
        controller.set_pending_direction(Direction.DOWN)
        controller.tick()
        assert controller.snake.head == (9, 11)
        assert controller.direction is Direction.DOWN

    def test_checked_against_committed_direction(self):
        controller, _ = _running()
        controller.set_pending_direction(Direction.UP)
        # LEFT shares the committed (rightward) axis even though UP is pending.
        assert not controller.set_pending_direction(Direction.LEFT)
        controller.tick()
        assert controller.direction is Direction.UP

    def test_ignored_when_paused(self):
        controller, _ = _running()
        controller.toggle_pause()
        assert not controller.set_pending_direction(Direction.UP)
        controller.toggle_pause()
        assert controller.pending_direction is Direction.RIGHT

    def test_ignored_when_idle(self):
        controller, _ = _controller()
        assert not controller.set_pending_direction(Direction.UP)


class TestPause:
    def test_toggle(self):
        controller, sink = _running()
        snap = controller.toggle_pause()
        assert snap.state is GameState.PAUSED
        assert not controller.ticker.running
        snap = controller.toggle_pause()
        assert snap.state is GameState.RUNNING
        assert controller.ticker.running
        assert [s.state for s in sink] == [GameState.PAUSED, GameState.RUNNING]

    def test_ignored_when_idle_or_over(self):
        controller, sink = _controller()
        assert controller.toggle_pause() is None
        controller.new_game()
        _place(controller, [(19, 10), (18, 10), (17, 10)], Direction.RIGHT)
        controller.tick()
        assert controller.toggle_pause() is None
        assert controller.state is GameState.GAME_OVER


class TestHandleInput:
    def test_dispatch(self):
        controller, _ = _controller()
        controller.handle_input(InputEvent.NEW_GAME)
        assert controller.state is GameState.RUNNING
        controller.handle_input(InputEvent.UP)
        assert controller.pending_direction is Direction.UP
        controller.handle_input(InputEvent.TOGGLE_PAUSE)
        assert controller.state is GameState.PAUSED


class TestSnapshot:
    def test_json_serializable(self):
        controller, _ = _running()
        controller.tick()
        data = controller.snapshot().to_dict()
        json.dumps(data)
        assert data["state"] == "running"
        assert data["direction"] == "right"
        assert data["food_level"]["identifier"] == "Worm"
        assert data["snake"][0] == [10, 10]

    def test_snapshot_is_frozen(self):
        controller, _ = _running()
        snap = controller.snapshot()
        controller.tick()
        assert snap.snake[0] == (9, 10)
        with pytest.raises(AttributeError):
            snap.score = 3

    def test_unsubscribe(self):
        controller, sink = _running()
        controller.unsubscribe(sink.append)
        controller.tick()
        assert sink == []


class TestDeterminism:
    def test_same_seed_same_pellets(self):
        a, _ = _controller()
        b, _ = _controller()
        assert a.new_game().pellet == b.new_game().pellet
