from .config import ConfigurationError, SessionConfig, UserSettings
from .formatting import (
    format_mmss,
    is_skip_disabled,
    is_work_session,
    pomodoro_progress,
    primary_button_label,
    window_title,
)
from .sequencer import SequenceStep, advance, classify_boundary
from .service import (
    IntervalBoundary,
    PomodoroActionResult,
    PomodoroSnapshot,
    PomodoroTick,
    PomodoroTimer,
)

__all__ = [
    "ConfigurationError",
    "IntervalBoundary",
    "PomodoroActionResult",
    "PomodoroSnapshot",
    "PomodoroTick",
    "PomodoroTimer",
    "SequenceStep",
    "SessionConfig",
    "UserSettings",
    "advance",
    "classify_boundary",
    "format_mmss",
    "is_skip_disabled",
    "is_work_session",
    "pomodoro_progress",
    "primary_button_label",
    "window_title",
]
