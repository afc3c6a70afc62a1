"""Public exports for the interval boundary chime."""

from .config import AudioCueConfig, AudioCueConfigurationError
from .output import AudioCueError, AudioCuePlayer, synthesize_chime

__all__ = [
    "AudioCueConfig",
    "AudioCueConfigurationError",
    "AudioCueError",
    "AudioCuePlayer",
    "synthesize_chime",
]
