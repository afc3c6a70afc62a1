"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class SettingsStoreSettings:
    """Location of the persisted session durations from `[settings_store]`."""
    path: str = "~/.config/pomodoro-timer/settings.json"


@dataclass(frozen=True)
class AudioSettings:
    """Boundary chime settings from `[audio]`."""
    enabled: bool = True
    output_device: Optional[int] = None
    frequency_hz: float = 880.0
    duration_seconds: float = 0.35
    volume: float = 0.4


@dataclass(frozen=True)
class NotificationSettings:
    """Boundary notification settings from `[notifications]`."""
    enabled: bool = True
    desktop: bool = True


@dataclass(frozen=True)
class UIServerSettings:
    """Built-in UI server settings from `[ui_server]`."""
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8765
    index_file: str = ""


@dataclass(frozen=True)
class LoggingSettings:
    """Root logger settings from `[logging]`."""
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    settings_store: SettingsStoreSettings = field(default_factory=SettingsStoreSettings)
    audio: AudioSettings = field(default_factory=AudioSettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    ui_server: UIServerSettings = field(default_factory=UIServerSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    source_file: str = ""
