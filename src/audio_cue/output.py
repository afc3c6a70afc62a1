"""Sounddevice-backed playback of the interval boundary chime."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import sounddevice as sd

from .config import AudioCueConfig


class AudioCueError(Exception):
    """Raised when the chime cannot be synthesised or played."""


def synthesize_chime(config: AudioCueConfig) -> np.ndarray:
    """Render a decaying two-partial sine chime as mono float32 PCM."""
    frames = max(1, int(config.sample_rate_hz * config.duration_seconds))
    t = np.arange(frames, dtype=np.float32) / float(config.sample_rate_hz)
    tone = np.sin(2.0 * np.pi * config.frequency_hz * t)
    tone += 0.5 * np.sin(2.0 * np.pi * config.frequency_hz * 1.5 * t)
    envelope = np.exp(-4.0 * t / max(config.duration_seconds, 1e-3))
    wav = tone * envelope
    peak = float(np.max(np.abs(wav))) or 1.0
    return (wav / peak * config.volume).astype(np.float32)


class AudioCuePlayer:
    """Plays a fixed chime; the PCM buffer is built on the first `play()`."""

    def __init__(
        self,
        config: Optional[AudioCueConfig] = None,
        blocksize: int = 1024,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config or AudioCueConfig()
        self._blocksize = blocksize
        self._logger = logger or logging.getLogger("audio_cue")
        self._wav: Optional[np.ndarray] = None

    @property
    def is_initialized(self) -> bool:
        return self._wav is not None

    def play(self) -> None:
        """Play the chime, returning once the buffer has been drained."""
        wav = self._ensure_initialized()
        sample_rate_hz = self._config.sample_rate_hz
        pos = 0

        def callback(outdata, frames, time_info, status):
            nonlocal pos
            if status:
                self._logger.warning("Sounddevice status: %s", status)

            end = pos + frames
            chunk = wav[pos:end]

            if len(chunk) < frames:
                outdata[: len(chunk), 0] = chunk
                outdata[len(chunk) :, 0] = 0
                raise sd.CallbackStop()

            outdata[:, 0] = chunk
            pos = end

        try:
            with sd.OutputStream(
                channels=1,
                samplerate=sample_rate_hz,
                blocksize=self._blocksize,
                callback=callback,
                device=self._config.output_device,
            ):
                sd.sleep(int(len(wav) / sample_rate_hz * 1000) + 100)
        except Exception as error:
            raise AudioCueError(f"Chime playback failed: {error}") from error

    def _ensure_initialized(self) -> np.ndarray:
        if self._wav is None:
            self._wav = synthesize_chime(self._config)
            self._logger.debug(
                "Synthesised chime: %d frames at %d Hz",
                len(self._wav),
                self._config.sample_rate_hz,
            )
        return self._wav
