"""Platform desktop-notification backends driven through subprocess."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import Optional, Protocol

from .messages import NotificationMessage

APP_NAME = "Pomodoro"


class NotificationUnavailableError(Exception):
    """Raised when no desktop notification mechanism can deliver a message."""


class NotificationBackend(Protocol):
    @property
    def available(self) -> bool:
        ...

    def show(self, message: NotificationMessage) -> None:
        ...


class CommandNotificationBackend:
    """Shows notifications with `notify-send` on Linux or `osascript` on macOS."""

    def __init__(
        self,
        *,
        platform: Optional[str] = None,
        timeout_seconds: float = 5.0,
        logger: Optional[logging.Logger] = None,
    ):
        self._platform = platform or sys.platform
        self._timeout_seconds = timeout_seconds
        self._logger = logger or logging.getLogger("notifier")

    @property
    def available(self) -> bool:
        executable = self._executable()
        return executable is not None and shutil.which(executable) is not None

    def show(self, message: NotificationMessage) -> None:
        if not self.available:
            raise NotificationUnavailableError(
                f"No desktop notification command available on {self._platform}"
            )

        command = self._command(message)
        try:
            subprocess.run(
                command,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                timeout=self._timeout_seconds,
            )
        except (OSError, subprocess.SubprocessError) as error:
            raise NotificationUnavailableError(
                f"Desktop notification failed: {error}"
            ) from error
        self._logger.debug("Desktop notification shown: %s", message.title)

    def _executable(self) -> Optional[str]:
        if self._platform.startswith("linux"):
            return "notify-send"
        if self._platform == "darwin":
            return "osascript"
        return None

    def _command(self, message: NotificationMessage) -> list[str]:
        if self._platform == "darwin":
            script = (
                f"display notification {_applescript_quote(message.body)} "
                f"with title {_applescript_quote(message.title)}"
            )
            return ["osascript", "-e", script]
        return ["notify-send", "-a", APP_NAME, message.title, message.body]


def _applescript_quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
