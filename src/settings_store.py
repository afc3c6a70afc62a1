"""JSON-backed persistence for the four user-configurable session values."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Any, Mapping, Optional

from pomodoro import ConfigurationError, SessionConfig

DEFAULT_SETTINGS_FILE = Path("~/.config/pomodoro-timer/settings.json")

SETTINGS_KEYS: tuple[str, ...] = (
    "work_duration",
    "short_break_duration",
    "long_break_duration",
    "long_break_delay",
)


class SettingsStoreError(Exception):
    """Raised when settings cannot be written to disk."""


class SettingsStore:
    """Reads and writes a `SessionConfig` as a flat JSON object.

    Reads never fail: a missing file, broken JSON, or any missing or invalid
    key falls back to the defaults, which are then written back so the file
    is complete on the next start. Writes replace the whole object.
    """

    def __init__(
        self,
        path: str | Path = DEFAULT_SETTINGS_FILE,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._path = Path(path).expanduser()
        self._logger = logger or logging.getLogger("settings_store")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SessionConfig:
        raw = self._read_raw()
        if raw is not None:
            try:
                return _config_from_mapping(raw)
            except (KeyError, ConfigurationError) as error:
                self._logger.warning(
                    "Stored settings in %s are incomplete or invalid (%s); using defaults.",
                    self._path,
                    error,
                )

        defaults = SessionConfig()
        try:
            self.save(defaults)
        except SettingsStoreError as error:
            self._logger.warning("Could not persist default settings: %s", error)
        return defaults

    def save(self, config: SessionConfig) -> None:
        payload = json.dumps(asdict(config), indent=2, sort_keys=True)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=".settings-",
                suffix=".json",
                dir=str(self._path.parent),
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload + "\n")
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as error:
            raise SettingsStoreError(
                f"Failed to write settings to {self._path}: {error}"
            ) from error

        self._logger.info("Saved settings to %s", self._path)

    def _read_raw(self) -> Optional[Mapping[str, Any]]:
        if not self._path.exists():
            self._logger.info("No stored settings at %s; using defaults.", self._path)
            return None

        try:
            with open(self._path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, ValueError) as error:
            self._logger.warning("Failed to read settings from %s: %s", self._path, error)
            return None

        if not isinstance(raw, Mapping):
            self._logger.warning("Settings file %s must contain a JSON object.", self._path)
            return None
        return raw


def _config_from_mapping(raw: Mapping[str, Any]) -> SessionConfig:
    missing = [key for key in SETTINGS_KEYS if key not in raw]
    if missing:
        raise KeyError(", ".join(missing))
    return SessionConfig(**{key: raw[key] for key in SETTINGS_KEYS})
