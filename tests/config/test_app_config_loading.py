import os
import tempfile
import textwrap
import unittest
from pathlib import Path
from unittest.mock import patch

from app_config import AppConfigurationError, load_app_config, resolve_config_path


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class AppConfigLoadingTests(unittest.TestCase):
    def test_load_app_config_parses_sections(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            config_path = root / "config.toml"
            _write_text(
                config_path,
                textwrap.dedent(
                    """
                    [settings_store]
                    path = "state/settings.json"

                    [audio]
                    enabled = false
                    output_device = 2
                    frequency_hz = 660
                    volume = 0.8

                    [notifications]
                    desktop = "off"

                    [ui_server]
                    port = 9000
                    index_file = "web/index.html"

                    [logging]
                    level = "debug"
                    """
                ).strip(),
            )

            app_config = load_app_config(str(config_path))

            self.assertEqual(str(config_path), app_config.source_file)
            self.assertEqual(
                str((root / "state/settings.json").resolve()),
                app_config.settings_store.path,
            )
            self.assertFalse(app_config.audio.enabled)
            self.assertEqual(2, app_config.audio.output_device)
            self.assertEqual(660.0, app_config.audio.frequency_hz)
            self.assertEqual(0.35, app_config.audio.duration_seconds)
            self.assertEqual(0.8, app_config.audio.volume)
            self.assertTrue(app_config.notifications.enabled)
            self.assertFalse(app_config.notifications.desktop)
            self.assertEqual(9000, app_config.ui_server.port)
            self.assertEqual("127.0.0.1", app_config.ui_server.host)
            self.assertEqual(
                str((root / "web/index.html").resolve()),
                app_config.ui_server.index_file,
            )
            self.assertEqual("DEBUG", app_config.logging.level)

    def test_home_relative_store_path_is_kept(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, '[settings_store]\npath = "~/timer.json"\n')

            app_config = load_app_config(str(config_path))

            self.assertEqual("~/timer.json", app_config.settings_store.path)

    def test_rejects_wrong_types(self) -> None:
        cases = (
            "[audio]\nenabled = 3\n",
            "[ui_server]\nport = \"eighty\"\n",
            "[logging]\nlevel = \"LOUD\"\n",
            "audio = 1\n",
        )
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            for content in cases:
                _write_text(config_path, content)
                with self.assertRaises(AppConfigurationError):
                    load_app_config(str(config_path))

    def test_rejects_invalid_toml(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, "[audio\n")
            with self.assertRaises(AppConfigurationError) as context:
                load_app_config(str(config_path))
            self.assertIn("Failed to parse config TOML", str(context.exception))

    def test_explicit_missing_file_is_an_error(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(AppConfigurationError):
                load_app_config(str(Path(temp_dir) / "missing.toml"))

    def test_missing_default_file_uses_builtin_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as cwd_dir:
            with patch.dict(os.environ, {}, clear=True):
                with patch("app_config.Path.cwd", return_value=Path(cwd_dir)):
                    app_config = load_app_config()

        self.assertEqual("", app_config.source_file)
        self.assertTrue(app_config.audio.enabled)
        self.assertEqual(8765, app_config.ui_server.port)
        self.assertEqual("INFO", app_config.logging.level)

    def test_resolve_config_path_honours_environment(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            env_config = Path(temp_dir) / "custom.toml"
            _write_text(env_config, "")
            with patch.dict(os.environ, {"APP_CONFIG_FILE": str(env_config)}, clear=True):
                self.assertEqual(env_config, resolve_config_path())
                self.assertEqual("", load_app_config().ui_server.index_file)


if __name__ == "__main__":
    unittest.main()
