"""Fixed notification copy for each interval boundary class."""

from __future__ import annotations

from dataclasses import dataclass

from pomodoro.constants import NOTIFY_BREAK_FINISHED, NOTIFY_WORK_FINISHED


@dataclass(frozen=True)
class NotificationMessage:
    classification: str
    title: str
    body: str


_MESSAGES = {
    NOTIFY_WORK_FINISHED: NotificationMessage(
        classification=NOTIFY_WORK_FINISHED,
        title="It's Break Time",
        body="Take a short break... :)",
    ),
    NOTIFY_BREAK_FINISHED: NotificationMessage(
        classification=NOTIFY_BREAK_FINISHED,
        title="It's Work Time!",
        body="Time to get back to work... :)",
    ),
}


def message_for(classification: str) -> NotificationMessage:
    try:
        return _MESSAGES[classification]
    except KeyError:
        raise ValueError(f"Unknown notification class: {classification!r}") from None
