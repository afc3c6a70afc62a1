import logging
import signal
from typing import Optional

from app_config import AppConfigurationError, load_app_config
from app_config_parser import log_level
from notifier import CommandNotificationBackend, Notifier
from pomodoro import PomodoroTimer
from runtime import IntervalTickSource, RuntimeBootstrap, RuntimeEngine
from server import ServerConfigurationError, UIServer, UIServerConfig
from settings_store import SettingsStore


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomodoro_app")


def setup_signal_handlers(engine: RuntimeEngine, logger: logging.Logger) -> None:
    """Ask the runtime loop to exit on SIGTERM and SIGINT."""

    def signal_handler(signum: int, frame) -> None:
        del frame
        logger.info("%s received, stopping...", signal.Signals(signum).name)
        engine.request_shutdown(0)

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def build_audio_cue(app_config, logger: logging.Logger):
    if not app_config.audio.enabled:
        logger.info("Audio cue disabled")
        return None

    # sounddevice loads PortAudio on import; a host without it runs silently.
    try:
        from audio_cue import AudioCueConfig, AudioCueConfigurationError, AudioCuePlayer
    except OSError as error:
        logger.warning("Audio cue unavailable (%s); continuing without sound.", error)
        return None

    try:
        config = AudioCueConfig.from_settings(app_config.audio)
    except AudioCueConfigurationError as error:
        logger.error("Audio configuration error: %s", error)
        logger.warning("Continuing without audio cue.")
        return None
    return AudioCuePlayer(config=config, logger=logging.getLogger("audio_cue"))


def main() -> int:
    """Run the pomodoro timer with its web UI."""
    logger = setup_logging(level=logging.INFO)

    try:
        app_config = load_app_config()
    except AppConfigurationError as error:
        logger.error("App configuration error: %s", error)
        return 1

    logging.getLogger().setLevel(log_level(app_config.logging))
    if app_config.source_file:
        logger.info("Loaded runtime config: %s", app_config.source_file)
    else:
        logger.info("No config.toml found; using built-in defaults.")

    settings_store = SettingsStore(
        app_config.settings_store.path,
        logger=logging.getLogger("settings_store"),
    )
    timer = PomodoroTimer(settings_store.load(), logger=logging.getLogger("pomodoro"))

    # Optional UI server for the timer page + websocket updates
    ui_server: Optional[UIServer] = None
    try:
        ui_server_config = UIServerConfig.from_settings(app_config.ui_server)
    except ServerConfigurationError as error:
        logger.error("UI server configuration error: %s", error)
        logger.warning("Continuing without UI server.")
        ui_server_config = None

    if ui_server_config and ui_server_config.enabled:
        ui_server = UIServer(
            config=ui_server_config,
            logger=logging.getLogger("ui_server"),
        )

    notifier: Optional[Notifier] = None
    if app_config.notifications.enabled:
        notifier = Notifier(
            publisher=ui_server,
            desktop=(
                CommandNotificationBackend(logger=logging.getLogger("notifier"))
                if app_config.notifications.desktop
                else None
            ),
            logger=logging.getLogger("notifier"),
        )

    engine = RuntimeEngine(
        RuntimeBootstrap(
            logger=logging.getLogger("runtime"),
            timer=timer,
            settings_store=settings_store,
            ui_server=ui_server,
            audio_cue=build_audio_cue(app_config, logger),
            notifier=notifier,
            tick_source_factory=lambda sink, is_running: IntervalTickSource(
                sink,
                is_running,
                logger=logging.getLogger("runtime.ticks"),
            ),
        )
    )

    if ui_server is not None:
        ui_server.set_command_handler(engine.submit_command)
        try:
            logger.info("Starting UI server...")
            ui_server.start(timeout_seconds=5.0)
            logger.info(
                "UI server ready at http://%s:%d",
                ui_server.host,
                ui_server.port,
            )
        except RuntimeError as error:
            logger.error("UI server startup error: %s", error)
            return 1

    setup_signal_handlers(engine, logger)
    return engine.run()


if __name__ == "__main__":
    raise SystemExit(main())
