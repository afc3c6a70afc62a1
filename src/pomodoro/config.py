"""Immutable session durations shared by the sequencer and the timer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import (
    DEFAULT_LONG_BREAK_DELAY,
    DEFAULT_LONG_BREAK_SECONDS,
    DEFAULT_SHORT_BREAK_SECONDS,
    DEFAULT_WORK_SECONDS,
    SECONDS_PER_MINUTE,
    SESSIONS_PER_PAIR,
)


class ConfigurationError(ValueError):
    """Raised when session durations are not positive integers."""


@dataclass(frozen=True)
class UserSettings:
    """Settings as entered by the user: minutes and pairs of sessions."""
    work_minutes: int
    short_break_minutes: int
    long_break_minutes: int
    long_break_pairs: int


@dataclass(frozen=True)
class SessionConfig:
    """Work/break durations in seconds plus the long-break delay count."""
    work_duration: int = DEFAULT_WORK_SECONDS
    short_break_duration: int = DEFAULT_SHORT_BREAK_SECONDS
    long_break_duration: int = DEFAULT_LONG_BREAK_SECONDS
    long_break_delay: int = DEFAULT_LONG_BREAK_DELAY

    def __post_init__(self) -> None:
        for name in (
            "work_duration",
            "short_break_duration",
            "long_break_duration",
            "long_break_delay",
        ):
            _require_positive_int(getattr(self, name), name)

    @property
    def max_duration(self) -> int:
        return max(
            self.work_duration,
            self.short_break_duration,
            self.long_break_duration,
        )

    @classmethod
    def from_user_settings(
        cls,
        *,
        work_minutes: int,
        short_break_minutes: int,
        long_break_minutes: int,
        long_break_pairs: int,
    ) -> "SessionConfig":
        """Build a config from minute durations and a delay counted in pairs."""
        return cls(
            work_duration=work_minutes * SECONDS_PER_MINUTE,
            short_break_duration=short_break_minutes * SECONDS_PER_MINUTE,
            long_break_duration=long_break_minutes * SECONDS_PER_MINUTE,
            long_break_delay=long_break_pairs * SESSIONS_PER_PAIR,
        )

    def to_user_settings(self) -> UserSettings:
        return UserSettings(
            work_minutes=self.work_duration // SECONDS_PER_MINUTE,
            short_break_minutes=self.short_break_duration // SECONDS_PER_MINUTE,
            long_break_minutes=self.long_break_duration // SECONDS_PER_MINUTE,
            long_break_pairs=self.long_break_delay // SESSIONS_PER_PAIR,
        )


def _require_positive_int(value: Any, field: str) -> None:
    # bool is an int subclass but never a meaningful duration.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field} must be an integer, got: {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{field} must be greater than zero, got: {value}")
