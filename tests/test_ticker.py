"""Tests for the tick sources."""

import asyncio

import pytest

from classic_snake.config import GameConfig
from classic_snake.controller import GameController, GameState
from classic_snake.ticker import AsyncioTicker, FrameClockTicker, ManualTicker


class TestManualTicker:
    def test_fire_only_while_started(self):
        ticker = ManualTicker()
        calls = []
        assert ticker.fire() == 0
        ticker.start(lambda: calls.append(1), 150)
        assert ticker.running
        assert ticker.fire(2) == 2
        ticker.stop()
        assert ticker.fire() == 0
        assert calls == [1, 1]
        assert (ticker.starts, ticker.stops) == (1, 1)

    def test_stop_inside_callback_halts_firing(self):
        ticker = ManualTicker()
        calls = []

        def callback():
            calls.append(1)
            ticker.stop()

        ticker.start(callback, 10)
        assert ticker.fire(5) == 1


class TestFrameClockTicker:
    def test_accumulates_frame_time(self):
        ticker = FrameClockTicker()
        calls = []
        ticker.start(lambda: calls.append(1), 150)
        assert ticker.advance(100) == 0
        assert ticker.advance(60) == 1
        assert ticker.advance(300) == 2
        assert len(calls) == 3

    def test_idle_when_stopped(self):
        ticker = FrameClockTicker()
        assert ticker.advance(1000) == 0
        ticker.start(lambda: None, 100)
        ticker.stop()
        assert not ticker.running
        assert ticker.advance(1000) == 0

    def test_stop_inside_callback(self):
        ticker = FrameClockTicker()
        ticker.start(ticker.stop, 10)
        assert ticker.advance(100) == 1


class TestAsyncioTicker:
    @pytest.mark.asyncio
    async def test_fires_repeatedly_until_stopped(self):
        ticker = AsyncioTicker()
        calls = []
        ticker.start(lambda: calls.append(1), 10)
        assert ticker.running
        await asyncio.sleep(0.1)
        ticker.stop()
        assert not ticker.running
        fired = len(calls)
        assert fired >= 2
        await asyncio.sleep(0.05)
        assert len(calls) == fired

    @pytest.mark.asyncio
    async def test_stop_from_callback(self):
        ticker = AsyncioTicker()
        calls = []

        def callback():
            calls.append(1)
            if len(calls) == 3:
                ticker.stop()

        ticker.start(callback, 5)
        await asyncio.sleep(0.15)
        assert len(calls) == 3
        assert not ticker.running

    @pytest.mark.asyncio
    async def test_drives_game_to_game_over(self):
        controller = GameController(
            GameConfig(tick_interval_ms=5, seed=3), ticker=AsyncioTicker(),
        )
        controller.new_game()
        for _ in range(200):
            if controller.state is GameState.GAME_OVER:
                break
            await asyncio.sleep(0.01)
        assert controller.state is GameState.GAME_OVER
        assert not controller.ticker.running
