"""Desktop and browser notifications for interval boundaries."""

from .backends import (
    CommandNotificationBackend,
    NotificationBackend,
    NotificationUnavailableError,
)
from .messages import NotificationMessage, message_for
from .service import Notifier

__all__ = [
    "CommandNotificationBackend",
    "NotificationBackend",
    "NotificationMessage",
    "NotificationUnavailableError",
    "Notifier",
    "message_for",
]
