"""Boundary notifier combining browser and desktop delivery."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from contracts.ui_protocol import EVENT_NOTIFICATION

from .backends import NotificationBackend, NotificationUnavailableError
from .messages import NotificationMessage, message_for


class NotificationPublisher(Protocol):
    def publish(self, event_type: str, **payload: Any) -> None:
        ...


class Notifier:
    """Renders boundary notifications.

    Connected pages receive a `notification` event and choose how to show
    it: a browser notification, or a blocking alert when the browser has no
    Notification support. The desktop backend, when configured, shows the
    same message through the operating system.
    """

    def __init__(
        self,
        *,
        publisher: Optional[NotificationPublisher] = None,
        desktop: Optional[NotificationBackend] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._publisher = publisher
        self._desktop = desktop
        self._logger = logger or logging.getLogger("notifier")

    def notify(self, classification: str) -> NotificationMessage:
        message = message_for(classification)
        if self._publisher is not None:
            self._publisher.publish(
                EVENT_NOTIFICATION,
                classification=message.classification,
                title=message.title,
                body=message.body,
            )

        if self._desktop is not None:
            try:
                self._desktop.show(message)
            except NotificationUnavailableError as error:
                self._logger.warning("%s", error)
        elif self._publisher is None:
            self._logger.warning("No notification channel for %r", classification)
        return message
