"""Runtime orchestration loop for UI commands, ticks, and boundary effects."""

from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass
from queue import Empty, Queue
from typing import Any, Callable, Optional

from contracts.ui_protocol import COMMAND_STOP
from pomodoro import (
    ConfigurationError,
    PomodoroActionResult,
    PomodoroTimer,
    SessionConfig,
)
from pomodoro.constants import (
    ACTION_ADVANCE,
    ACTION_SYNC,
    ACTION_TICK,
    REASON_EXPIRED,
    REASON_STARTUP,
    REASON_TICK,
)
from settings_store import SettingsStore, SettingsStoreError

from .commands import CommandError, SettingsCommand, TimerCommand, parse_command
from .effects import AudioCueLike, BoundaryEffects, EffectDependencies, NotifierLike
from .ticks import TickEvent, TickSink, TickSource
from .ui import RuntimeUIPublisher, UIServerLike

TickSourceFactory = Callable[[TickSink, Callable[[], bool]], TickSource]


@dataclass(frozen=True)
class CommandEvent:
    """Raw websocket text frame waiting to be parsed on the runtime thread."""
    raw: str


@dataclass(frozen=True)
class ShutdownEvent:
    exit_code: int = 0


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    timer: PomodoroTimer
    settings_store: Optional[SettingsStore]
    ui_server: Optional[UIServerLike]
    audio_cue: Optional[AudioCueLike]
    notifier: Optional[NotifierLike]
    tick_source_factory: TickSourceFactory
    effects_executor: Optional[concurrent.futures.Executor] = None


class RuntimeEngine:
    """Single consumer of commands and ticks; the only caller that mutates the timer."""
    def __init__(self, bootstrap: RuntimeBootstrap):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        self._timer = bootstrap.timer
        self._ui = RuntimeUIPublisher(bootstrap.ui_server)
        self._effects = BoundaryEffects(
            EffectDependencies(
                audio_cue=bootstrap.audio_cue,
                notifier=bootstrap.notifier,
                logger=self._logger,
            ),
            executor=bootstrap.effects_executor,
        )
        self._event_queue: Queue[Any] = Queue()
        self._tick_source = bootstrap.tick_source_factory(
            self.post_tick,
            self._is_timer_running,
        )

    @property
    def tick_source(self) -> TickSource:
        return self._tick_source

    # Thread-safe entry points used by the UI server and tick threads.
    def submit_command(self, raw: str) -> None:
        self._event_queue.put(CommandEvent(raw=raw))

    def post_tick(self, tick: TickEvent) -> None:
        self._event_queue.put(tick)

    def request_shutdown(self, exit_code: int = 0) -> None:
        self._event_queue.put(ShutdownEvent(exit_code=exit_code))

    def run(self) -> int:
        self.publish_startup_sync()
        self._tick_source.start()
        self._logger.info("Timer ready.")

        try:
            while True:
                try:
                    event = self._event_queue.get(timeout=0.25)
                except Empty:
                    continue

                try:
                    exit_code = self.handle_event(event)
                except Exception as error:
                    self._logger.error(
                        "Failed to handle %s: %s",
                        type(event).__name__,
                        error,
                        exc_info=True,
                    )
                    continue
                if exit_code is not None:
                    return exit_code

        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            return 0
        except Exception as error:
            self._logger.error("Unexpected error: %s", error, exc_info=True)
            return 1
        finally:
            self._shutdown()

    def drain(self) -> Optional[int]:
        """Handle every queued event on the calling thread."""
        while True:
            try:
                event = self._event_queue.get_nowait()
            except Empty:
                return None
            exit_code = self.handle_event(event)
            if exit_code is not None:
                return exit_code

    def handle_event(self, event: Any) -> Optional[int]:
        if isinstance(event, TickEvent):
            self._handle_tick()
            return None

        if isinstance(event, CommandEvent):
            self._handle_command(event.raw)
            return None

        if isinstance(event, ShutdownEvent):
            self._logger.info("Shutdown requested.")
            return event.exit_code

        self._logger.warning("Ignoring unknown event type: %s", type(event).__name__)
        return None

    def publish_startup_sync(self) -> None:
        config = self._timer.config
        self._ui.publish_settings(config)
        self._ui.publish_pomodoro_update(
            self._timer.snapshot(),
            config,
            action=ACTION_SYNC,
            accepted=True,
            reason=REASON_STARTUP,
        )

    def _is_timer_running(self) -> bool:
        return self._timer.snapshot().is_running

    def _handle_tick(self) -> None:
        tick = self._timer.tick()
        if tick is None:
            return

        self._ui.publish_pomodoro_update(
            tick.snapshot,
            self._timer.config,
            action=ACTION_ADVANCE if tick.advanced else ACTION_TICK,
            accepted=True,
            reason=REASON_EXPIRED if tick.advanced else REASON_TICK,
        )
        if tick.boundary is not None:
            self._effects.handle_boundary(tick.boundary)

    def _handle_command(self, raw: str) -> None:
        try:
            command = parse_command(raw)
        except CommandError as error:
            self._logger.warning("Rejected UI command: %s", error)
            self._ui.publish_error(str(error))
            return

        if isinstance(command, TimerCommand):
            self._apply_timer_action(command.action)
            return

        if isinstance(command, SettingsCommand):
            self._apply_settings(command)

    def _apply_timer_action(self, action: str) -> None:
        result = self._timer.apply(action)
        if not result.accepted:
            self._logger.info("Timer action %s rejected: %s", action, result.reason)
        self._publish_result(result)
        if result.boundary is not None:
            self._effects.handle_boundary(result.boundary)
        if action == COMMAND_STOP:
            self._ui.clear_error()

    def _apply_settings(self, command: SettingsCommand) -> None:
        settings = command.settings
        try:
            config = SessionConfig.from_user_settings(
                work_minutes=settings.work_minutes,
                short_break_minutes=settings.short_break_minutes,
                long_break_minutes=settings.long_break_minutes,
                long_break_pairs=settings.long_break_pairs,
            )
        except ConfigurationError as error:
            self._logger.warning("Rejected settings: %s", error)
            self._ui.publish_error(str(error))
            return

        store = self._bootstrap.settings_store
        persisted = True
        if store is not None:
            try:
                store.save(config)
            except SettingsStoreError as error:
                persisted = False
                self._logger.error("%s", error)
                self._ui.publish_error(f"Settings applied but not saved: {error}")

        result = self._timer.replace_config(config)
        if persisted:
            self._ui.clear_error()
        self._ui.publish_settings(config)
        self._publish_result(result)

    def _publish_result(self, result: PomodoroActionResult) -> None:
        self._ui.publish_pomodoro_update(
            result.snapshot,
            self._timer.config,
            action=result.action,
            accepted=result.accepted,
            reason=result.reason,
        )

    def _shutdown(self) -> None:
        self._logger.info("Stopping tick source...")
        self._tick_source.stop()
        self._effects.shutdown()

        ui_server = self._bootstrap.ui_server
        stop = getattr(ui_server, "stop", None)
        if stop is not None:
            self._logger.info("Stopping UI server...")
            try:
                stop(timeout_seconds=5.0)
            except Exception as error:
                self._logger.error("Error stopping UI server: %s", error, exc_info=True)
