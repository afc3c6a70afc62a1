"""One-second tick sources that feed the runtime event queue."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

TickSink = Callable[["TickEvent"], None]


@dataclass(frozen=True)
class TickEvent:
    """One elapsed second, posted while the timer reports running."""
    sequence: int


class TickSource(Protocol):
    def start(self) -> None:
        ...

    def stop(self, timeout_seconds: float = 2.0) -> None:
        ...


class IntervalTickSource:
    """Daemon thread posting a `TickEvent` once per second.

    Ticks are scheduled against `time.monotonic` so slow consumers do not
    accumulate drift, and are only posted while `is_running()` is true.
    """

    def __init__(
        self,
        sink: TickSink,
        is_running: Callable[[], bool],
        *,
        interval_seconds: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[logging.Logger] = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")
        self._sink = sink
        self._is_running = is_running
        self._interval_seconds = interval_seconds
        self._clock = clock
        self._logger = logger or logging.getLogger("runtime.ticks")
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._sequence = 0

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_alive:
            self._logger.warning("Tick source is already running")
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name="tick-source",
        )
        self._thread.start()

    def stop(self, timeout_seconds: float = 2.0) -> None:
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join(timeout=timeout_seconds)
        if self._thread.is_alive():
            self._logger.error("Tick thread did not stop within %.1fs", timeout_seconds)
        self._thread = None

    def _run(self) -> None:
        next_deadline = self._clock() + self._interval_seconds
        was_running = False
        while not self._stop_event.wait(max(0.0, next_deadline - self._clock())):
            running = self._is_running()
            if running and not was_running:
                # Count a fresh second from the moment the timer (re)starts.
                next_deadline = self._clock() + self._interval_seconds
                was_running = True
                continue
            was_running = running

            if running:
                self._sequence += 1
                self._sink(TickEvent(sequence=self._sequence))
            next_deadline += self._interval_seconds
            # Resynchronise after a long stall rather than bursting ticks.
            now = self._clock()
            if next_deadline < now:
                next_deadline = now + self._interval_seconds


class ManualTickSource:
    """Tick source for tests and scripted runs: `fire()` posts ticks synchronously."""

    def __init__(self, sink: TickSink, is_running: Callable[[], bool]):
        self._sink = sink
        self._is_running = is_running
        self._sequence = 0
        self.started = False

    def start(self) -> None:
        self.started = True

    def stop(self, timeout_seconds: float = 2.0) -> None:
        del timeout_seconds
        self.started = False

    def fire(self, count: int = 1) -> int:
        """Post up to `count` ticks, skipping any while the timer is not running."""
        posted = 0
        for _ in range(count):
            if not self._is_running():
                continue
            self._sequence += 1
            self._sink(TickEvent(sequence=self._sequence))
            posted += 1
        return posted
