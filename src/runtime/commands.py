"""Parsing and validation of commands sent by the web UI."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Union

from contracts.ui_protocol import COMMAND_SETTINGS, TIMER_COMMANDS
from pomodoro import UserSettings

_SETTINGS_FIELDS: tuple[str, ...] = (
    "work_minutes",
    "short_break_minutes",
    "long_break_minutes",
    "long_break_pairs",
)


class CommandError(ValueError):
    """Raised when a UI message is not a recognised command."""


class SettingsValidationError(CommandError):
    """Raised when submitted settings are not positive whole numbers."""


@dataclass(frozen=True)
class TimerCommand:
    action: str


@dataclass(frozen=True)
class SettingsCommand:
    settings: UserSettings


UICommand = Union[TimerCommand, SettingsCommand]


def parse_command(raw: str) -> UICommand:
    """Decode one websocket text frame into a timer or settings command."""
    try:
        message = json.loads(raw)
    except ValueError as error:
        raise CommandError(f"UI command is not valid JSON: {error}") from error

    if not isinstance(message, Mapping):
        raise CommandError("UI command must be a JSON object.")

    command = message.get("command")
    if command in TIMER_COMMANDS:
        return TimerCommand(action=command)
    if command == COMMAND_SETTINGS:
        return SettingsCommand(settings=parse_user_settings(message.get("settings")))
    raise CommandError(f"Unsupported UI command: {command!r}")


def parse_user_settings(raw: Any) -> UserSettings:
    """Validate the settings form; values may be ints or numeric strings."""
    if not isinstance(raw, Mapping):
        raise SettingsValidationError("settings must be an object.")

    values = {field: _as_positive_int(raw.get(field), field) for field in _SETTINGS_FIELDS}
    return UserSettings(**values)


def _as_positive_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise SettingsValidationError(f"{field} must be a whole number.")
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and _is_ascii_digits(value.strip()):
        number = int(value.strip())
    else:
        raise SettingsValidationError(f"{field} must be a whole number.")

    if number <= 0:
        raise SettingsValidationError(f"{field} must be greater than zero.")
    return number


def _is_ascii_digits(text: str) -> bool:
    # str.isdigit() also accepts superscripts and other digits int() rejects.
    return text.isascii() and text.isdigit()
