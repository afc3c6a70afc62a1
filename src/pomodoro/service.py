"""Thread-safe in-memory pomodoro state machine driven by external ticks."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Literal, Optional

from .config import SessionConfig
from .constants import (
    ACTION_PAUSE,
    ACTION_SETTINGS,
    ACTION_SKIP,
    ACTION_START,
    ACTION_STOP,
    INTERVAL_WORK,
    REASON_ALREADY_RUNNING,
    REASON_NOT_RUNNING,
    REASON_PAUSED,
    REASON_RESUMED,
    REASON_SETTINGS_UPDATED,
    REASON_SKIPPED,
    REASON_STARTED,
    REASON_STOPPED,
    REASON_UNSUPPORTED_ACTION,
    RUN_IDLE,
    RUN_PAUSED,
    RUN_RUNNING,
)
from .sequencer import advance, classify_boundary

RunState = Literal["idle", "running", "paused"]
IntervalKind = Literal["work", "short_break", "long_break"]


@dataclass(frozen=True)
class PomodoroSnapshot:
    """Immutable timer snapshot exposed to runtime and UI publishers."""
    run_state: RunState
    session_index: int
    interval: IntervalKind
    duration_seconds: int
    remaining_seconds: int

    @property
    def is_running(self) -> bool:
        return self.run_state == RUN_RUNNING


@dataclass(frozen=True)
class IntervalBoundary:
    """Description of an interval that just ended, for the effect dispatcher."""
    finished_index: int
    finished_interval: IntervalKind
    next_interval: IntervalKind
    notification: str
    auto_stopped: bool


@dataclass(frozen=True)
class PomodoroActionResult:
    """Result envelope returned after applying a timer action."""
    action: str
    accepted: bool
    reason: str
    snapshot: PomodoroSnapshot
    boundary: Optional[IntervalBoundary] = None


@dataclass(frozen=True)
class PomodoroTick:
    """Result of one delivered tick; `boundary` is set when an interval ended."""
    snapshot: PomodoroSnapshot
    boundary: Optional[IntervalBoundary] = None

    @property
    def advanced(self) -> bool:
        return self.boundary is not None


class PomodoroTimer:
    """Work/break cycle state machine.

    The timer owns no clock: a tick source calls `tick()` once per second
    while the timer is running. Interval boundaries are returned as
    `IntervalBoundary` values and never trigger side effects here.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config or SessionConfig()
        self._logger = logger or logging.getLogger("pomodoro")
        self._lock = threading.Lock()

        self._run_state: RunState = RUN_IDLE
        self._session_index = 1
        self._interval: IntervalKind = INTERVAL_WORK
        self._duration_seconds = self._config.work_duration
        self._remaining_seconds = self._config.work_duration

    @property
    def config(self) -> SessionConfig:
        with self._lock:
            return self._config

    def snapshot(self) -> PomodoroSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def apply(self, action: str) -> PomodoroActionResult:
        with self._lock:
            if action == ACTION_START:
                if self._run_state == RUN_RUNNING:
                    return self._result_locked(action, False, REASON_ALREADY_RUNNING)

                reason = REASON_RESUMED if self._run_state == RUN_PAUSED else REASON_STARTED
                self._run_state = RUN_RUNNING
                self._logger.info(
                    "Pomodoro %s: session=%d interval=%s remaining=%ss",
                    reason,
                    self._session_index,
                    self._interval,
                    self._remaining_seconds,
                )
                return self._result_locked(action, True, reason)

            if action == ACTION_PAUSE:
                if self._run_state != RUN_RUNNING:
                    return self._result_locked(action, False, REASON_NOT_RUNNING)

                self._run_state = RUN_PAUSED
                self._logger.info(
                    "Pomodoro paused: session=%d remaining=%ss",
                    self._session_index,
                    self._remaining_seconds,
                )
                return self._result_locked(action, True, REASON_PAUSED)

            if action == ACTION_STOP:
                self._reset_locked()
                self._logger.info("Pomodoro stopped")
                return self._result_locked(action, True, REASON_STOPPED)

            if action == ACTION_SKIP:
                boundary = self._advance_locked()
                return self._result_locked(action, True, REASON_SKIPPED, boundary)

            return self._result_locked(action, False, REASON_UNSUPPORTED_ACTION)

    def tick(self) -> Optional[PomodoroTick]:
        """Consume one elapsed second; ignored unless the timer is running."""
        with self._lock:
            if self._run_state != RUN_RUNNING:
                return None

            if self._remaining_seconds > 0:
                self._remaining_seconds -= 1
                return PomodoroTick(snapshot=self._snapshot_locked())

            boundary = self._advance_locked()
            return PomodoroTick(snapshot=self._snapshot_locked(), boundary=boundary)

    def replace_config(self, config: SessionConfig) -> PomodoroActionResult:
        """Swap in new durations and restart the cycle from the first session."""
        with self._lock:
            self._config = config
            self._reset_locked()
            self._logger.info(
                "Pomodoro settings updated: work=%ss short=%ss long=%ss delay=%d",
                config.work_duration,
                config.short_break_duration,
                config.long_break_duration,
                config.long_break_delay,
            )
            return self._result_locked(ACTION_SETTINGS, True, REASON_SETTINGS_UPDATED)

    def _advance_locked(self) -> IntervalBoundary:
        finished_index = self._session_index
        finished_interval = self._interval
        step = advance(finished_index, self._config)

        self._session_index = step.next_index
        self._interval = step.next_interval  # type: ignore[assignment]
        self._duration_seconds = step.next_duration
        self._remaining_seconds = step.next_duration
        if step.auto_stop:
            self._run_state = RUN_IDLE

        self._logger.info(
            "Pomodoro advanced: session=%d -> %d interval=%s duration=%ss state=%s",
            finished_index,
            step.next_index,
            step.next_interval,
            step.next_duration,
            self._run_state,
        )
        return IntervalBoundary(
            finished_index=finished_index,
            finished_interval=finished_interval,
            next_interval=step.next_interval,  # type: ignore[arg-type]
            notification=classify_boundary(finished_index),
            auto_stopped=step.auto_stop,
        )

    def _reset_locked(self) -> None:
        self._run_state = RUN_IDLE
        self._session_index = 1
        self._interval = INTERVAL_WORK
        self._duration_seconds = self._config.work_duration
        self._remaining_seconds = self._config.work_duration

    def _result_locked(
        self,
        action: str,
        accepted: bool,
        reason: str,
        boundary: Optional[IntervalBoundary] = None,
    ) -> PomodoroActionResult:
        return PomodoroActionResult(
            action=action,
            accepted=accepted,
            reason=reason,
            snapshot=self._snapshot_locked(),
            boundary=boundary,
        )

    def _snapshot_locked(self) -> PomodoroSnapshot:
        return PomodoroSnapshot(
            run_state=self._run_state,
            session_index=self._session_index,
            interval=self._interval,
            duration_seconds=self._duration_seconds,
            remaining_seconds=self._remaining_seconds,
        )
