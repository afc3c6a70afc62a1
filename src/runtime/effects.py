"""Side effects run when the timer crosses an interval boundary."""

from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from pomodoro import IntervalBoundary


class AudioCueLike(Protocol):
    def play(self) -> None:
        ...


class NotifierLike(Protocol):
    def notify(self, classification: str) -> object:
        ...


@dataclass(frozen=True)
class EffectDependencies:
    """Collaborators invoked for every interval boundary."""
    audio_cue: Optional[AudioCueLike]
    notifier: Optional[NotifierLike]
    logger: logging.Logger


class BoundaryEffects:
    """Plays the chime and sends the notification for each boundary.

    Chime playback blocks for its own length and desktop notifications run
    a subprocess, so both run on a single background worker in submission
    order and never delay the runtime loop.
    """

    def __init__(
        self,
        dependencies: EffectDependencies,
        *,
        executor: Optional[concurrent.futures.Executor] = None,
    ):
        self._dependencies = dependencies
        self._owns_executor = executor is None
        self._executor = executor or concurrent.futures.ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="boundary-effects",
        )

    def handle_boundary(self, boundary: IntervalBoundary) -> None:
        deps = self._dependencies
        deps.logger.info(
            "Interval boundary: session=%d %s -> %s (%s)",
            boundary.finished_index,
            boundary.finished_interval,
            boundary.next_interval,
            boundary.notification,
        )

        if deps.audio_cue is not None:
            self._submit("Audio cue", deps.audio_cue.play)

        if deps.notifier is not None:
            self._submit("Notification", deps.notifier.notify, boundary.notification)

    def shutdown(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def _submit(self, label: str, fn: Callable[..., object], *args: object) -> None:
        try:
            future = self._executor.submit(fn, *args)
        except RuntimeError as error:
            # Executor already shut down.
            self._dependencies.logger.warning("%s skipped: %s", label, error)
            return

        def log_failure(done: concurrent.futures.Future) -> None:
            if done.cancelled():
                return
            error = done.exception()
            if error is not None:
                self._dependencies.logger.error("%s failed: %s", label, error)

        future.add_done_callback(log_failure)
