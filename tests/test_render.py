"""Tests for the text renderer."""

from classic_snake.config import GameConfig
from classic_snake.controller import GameController
from classic_snake.grid import Position
from classic_snake.render import render_text, status_line


class TestRenderText:
    def test_board_layout(self):
        controller = GameController(GameConfig(grid_size=10, seed=0))
        controller.new_game()
        controller.pellet = Position(0, 0)
        text = render_text(controller.snapshot(), controller.grid)
        lines = text.splitlines()
        assert len(lines) == 11
        assert all(len(line) == 10 for line in lines[:10])
        assert lines[0][0] == "*"
        assert lines[5] == "..oo@....."

    def test_status_line(self):
        controller = GameController(GameConfig(seed=0))
        snap = controller.snapshot()
        assert status_line(snap) == "score 0  best 0  food Worm  [idle]"
