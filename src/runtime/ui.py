from __future__ import annotations

from typing import Any, Optional, Protocol

from contracts.ui_protocol import EVENT_ERROR, EVENT_POMODORO, EVENT_SETTINGS
from pomodoro import (
    PomodoroSnapshot,
    SessionConfig,
    format_mmss,
    is_skip_disabled,
    pomodoro_progress,
    primary_button_label,
    window_title,
)


class UIServerLike(Protocol):
    def publish(self, event_type: str, **payload: Any) -> None:
        ...

    def forget(self, event_type: str) -> None:
        ...


class RuntimeUIPublisher:
    def __init__(self, ui_server: Optional[UIServerLike]):
        self._ui_server = ui_server

    def publish(self, event_type: str, **payload: Any) -> None:
        if self._ui_server:
            self._ui_server.publish(event_type, **payload)

    def publish_pomodoro_update(
        self,
        snapshot: PomodoroSnapshot,
        config: SessionConfig,
        *,
        action: str,
        accepted: Optional[bool] = None,
        reason: str = "",
    ) -> None:
        current_pomodoro, pomodoros_per_cycle = pomodoro_progress(
            snapshot.session_index,
            config.long_break_delay,
        )
        payload: dict[str, Any] = {
            "action": action,
            "run_state": snapshot.run_state,
            "session_index": snapshot.session_index,
            "interval": snapshot.interval,
            "duration_seconds": snapshot.duration_seconds,
            "remaining_seconds": snapshot.remaining_seconds,
            "time": format_mmss(snapshot.remaining_seconds),
            "title": window_title(snapshot.remaining_seconds, snapshot.session_index),
            "button_label": primary_button_label(snapshot.run_state),
            "skip_disabled": is_skip_disabled(snapshot.run_state, snapshot.session_index),
            "current_pomodoro": current_pomodoro,
            "pomodoros_per_cycle": pomodoros_per_cycle,
        }
        if accepted is not None:
            payload["accepted"] = accepted
        if reason:
            payload["reason"] = reason
        self.publish(EVENT_POMODORO, **payload)

    def publish_settings(self, config: SessionConfig) -> None:
        user = config.to_user_settings()
        self.publish(
            EVENT_SETTINGS,
            work_minutes=user.work_minutes,
            short_break_minutes=user.short_break_minutes,
            long_break_minutes=user.long_break_minutes,
            long_break_pairs=user.long_break_pairs,
        )

    def publish_error(self, message: str) -> None:
        self.publish(EVENT_ERROR, message=message)

    def clear_error(self) -> None:
        if self._ui_server:
            self._ui_server.forget(EVENT_ERROR)
