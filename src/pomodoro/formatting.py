"""Time formatting and derived display values for timer snapshots."""

from __future__ import annotations

from .constants import (
    RUN_IDLE,
    RUN_PAUSED,
    RUN_RUNNING,
    SECONDS_PER_MINUTE,
    SESSIONS_PER_PAIR,
)

_BUTTON_LABELS = {
    RUN_IDLE: "Start",
    RUN_RUNNING: "Pause",
    RUN_PAUSED: "Resume",
}


def format_mmss(seconds: int) -> str:
    """Format a non-negative number of seconds as `MM:SS`.

    Minutes are not capped, so long intervals render as e.g. `120:00`.
    """
    minutes, remainder = divmod(int(seconds), SECONDS_PER_MINUTE)
    return f"{minutes:02d}:{remainder:02d}"


def is_work_session(session_index: int) -> bool:
    return session_index % 2 != 0


def window_title(remaining_seconds: int, session_index: int) -> str:
    label = "Work" if is_work_session(session_index) else "Break"
    return f"{format_mmss(remaining_seconds)} - {label}"


def primary_button_label(run_state: str) -> str:
    """Label for the start/pause/resume button."""
    try:
        return _BUTTON_LABELS[run_state]
    except KeyError:
        raise ValueError(f"Unknown run state: {run_state!r}") from None


def is_skip_disabled(run_state: str, session_index: int) -> bool:
    # Nothing to skip before the first interval has been started.
    return run_state == RUN_IDLE and session_index == 1


def pomodoro_progress(session_index: int, long_break_delay: int) -> tuple[int, int]:
    """Return `(current_pomodoro, pomodoros_per_cycle)` for the progress row."""
    per_cycle = max(1, long_break_delay // SESSIONS_PER_PAIR)
    current = (session_index + 1) // 2
    return current, per_cycle
