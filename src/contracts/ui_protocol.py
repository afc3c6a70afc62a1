"""Web UI websocket event and command constants."""

from __future__ import annotations

# Websocket event types (server -> page)
EVENT_HELLO = "hello"
EVENT_POMODORO = "pomodoro"
EVENT_SETTINGS = "settings"
EVENT_NOTIFICATION = "notification"
EVENT_ERROR = "error"

# Websocket commands (page -> server)
COMMAND_START = "start"
COMMAND_PAUSE = "pause"
COMMAND_STOP = "stop"
COMMAND_SKIP = "skip"
COMMAND_SETTINGS = "settings"

TIMER_COMMANDS: frozenset[str] = frozenset(
    {COMMAND_START, COMMAND_PAUSE, COMMAND_STOP, COMMAND_SKIP}
)

# Notifications are one-shot; replaying them to a reconnecting
# page would repeat a boundary that already happened.
STICKY_EVENT_TYPES: frozenset[str] = frozenset(
    {
        EVENT_POMODORO,
        EVENT_SETTINGS,
        EVENT_ERROR,
    }
)

STICKY_EVENT_ORDER: tuple[str, ...] = (
    EVENT_SETTINGS,
    EVENT_POMODORO,
    EVENT_ERROR,
)
