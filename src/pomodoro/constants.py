"""State, action, and reason constants used by pomodoro runtime logic."""

from __future__ import annotations

DEFAULT_WORK_SECONDS = 25 * 60
DEFAULT_SHORT_BREAK_SECONDS = 5 * 60
DEFAULT_LONG_BREAK_SECONDS = 20 * 60
DEFAULT_LONG_BREAK_DELAY = 4

SECONDS_PER_MINUTE = 60
SESSIONS_PER_PAIR = 2

RUN_IDLE = "idle"
RUN_RUNNING = "running"
RUN_PAUSED = "paused"

INTERVAL_WORK = "work"
INTERVAL_SHORT_BREAK = "short_break"
INTERVAL_LONG_BREAK = "long_break"

NOTIFY_WORK_FINISHED = "work-finished"
NOTIFY_BREAK_FINISHED = "break-finished"

ACTION_START = "start"
ACTION_PAUSE = "pause"
ACTION_STOP = "stop"
ACTION_SKIP = "skip"
ACTION_SETTINGS = "settings"

ACTION_SYNC = "sync"
ACTION_TICK = "tick"
ACTION_ADVANCE = "advance"

REASON_STARTED = "started"
REASON_RESUMED = "resumed"
REASON_PAUSED = "paused"
REASON_STOPPED = "stopped"
REASON_SKIPPED = "skipped"
REASON_SETTINGS_UPDATED = "settings_updated"
REASON_ALREADY_RUNNING = "already_running"
REASON_NOT_RUNNING = "not_running"
REASON_UNSUPPORTED_ACTION = "unsupported_action"

REASON_TICK = "tick"
REASON_EXPIRED = "expired"
REASON_STARTUP = "startup"
