"""Configuration model for the boundary chime and its output device."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class AudioCueConfigurationError(Exception):
    """Raised when chime settings are invalid."""


@dataclass(frozen=True)
class AudioCueConfig:
    """Validated chime synthesis and output-device settings."""
    frequency_hz: float = 880.0
    duration_seconds: float = 0.35
    volume: float = 0.4
    sample_rate_hz: int = 44100
    output_device: Optional[int] = None

    def __post_init__(self) -> None:
        if self.frequency_hz <= 0:
            raise AudioCueConfigurationError(
                f"audio.frequency_hz must be positive, got: {self.frequency_hz}"
            )
        if self.duration_seconds <= 0:
            raise AudioCueConfigurationError(
                f"audio.duration_seconds must be positive, got: {self.duration_seconds}"
            )
        if not 0.0 < self.volume <= 1.0:
            raise AudioCueConfigurationError(
                f"audio.volume must be in (0, 1], got: {self.volume}"
            )
        if self.sample_rate_hz <= 0:
            raise AudioCueConfigurationError(
                f"audio.sample_rate_hz must be positive, got: {self.sample_rate_hz}"
            )

    @classmethod
    def from_settings(cls, settings) -> "AudioCueConfig":
        return cls(
            frequency_hz=float(settings.frequency_hz),
            duration_seconds=float(settings.duration_seconds),
            volume=float(settings.volume),
            output_device=settings.output_device,
        )
