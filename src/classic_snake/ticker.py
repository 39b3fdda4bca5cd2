"""Tick sources that drive the game controller."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class TickSource(Protocol):
    """Repeating timer abstraction injected into the controller."""

    @property
    def running(self) -> bool: ...

    def start(self, callback: TickCallback, interval_ms: int) -> None: ...

    def stop(self) -> None: ...


class ManualTicker:
    """Deterministic stepper: ticks happen only when :meth:`fire` is called."""

    def __init__(self) -> None:
        self._callback: TickCallback | None = None
        self.interval_ms: int | None = None
        self.starts = 0
        self.stops = 0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback, interval_ms: int) -> None:
        self._callback = callback
        self.interval_ms = interval_ms
        self.starts += 1

    def stop(self) -> None:
        if self._callback is not None:
            self.stops += 1
        self._callback = None

    def fire(self, times: int = 1) -> int:
        """Invoke the callback up to *times* times; return how many ran."""
        fired = 0
        for _ in range(times):
            if self._callback is None:
                break
            self._callback()
            fired += 1
        return fired


class AsyncioTicker:
    """Runs the callback every ``interval_ms`` on the running event loop."""

    def __init__(self) -> None:
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, callback: TickCallback, interval_ms: int) -> None:
        self.stop()
        self._task = asyncio.get_running_loop().create_task(
            self._loop(callback, interval_ms / 1000.0),
        )

    def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        # Stopping from inside the callback: let the loop exit on its own.
        if task is current:
            return
        task.cancel()

    async def _loop(self, callback: TickCallback, interval: float) -> None:
        me = asyncio.current_task()
        try:
            while self._task is me:
                await asyncio.sleep(interval)
                if self._task is not me:
                    break
                callback()
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
        except Exception:
            logger.exception("Tick callback failed; stopping tick loop.")
            if self._task is me:
                self._task = None


class FrameClockTicker:
    """Fires the callback from a frame loop once enough time has elapsed.

    A GUI main loop calls :meth:`advance` every frame with the elapsed
    milliseconds; the callback runs once per accumulated interval.
    """

    def __init__(self) -> None:
        self._callback: TickCallback | None = None
        self._interval_ms = 0
        self._accumulated = 0.0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback, interval_ms: int) -> None:
        self._callback = callback
        self._interval_ms = interval_ms
        self._accumulated = 0.0

    def stop(self) -> None:
        self._callback = None
        self._accumulated = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Account for *elapsed_ms* of wall time; return ticks fired."""
        if self._callback is None:
            return 0
        self._accumulated += elapsed_ms
        fired = 0
        while self._callback is not None and self._accumulated >= self._interval_ms:
            self._accumulated -= self._interval_ms
            self._callback()
            fired += 1
        return fired
