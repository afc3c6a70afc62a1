import concurrent.futures
import logging
import threading
import unittest

from pomodoro import IntervalBoundary
from runtime.effects import BoundaryEffects, EffectDependencies

_BOUNDARY = IntervalBoundary(
    finished_index=1,
    finished_interval="work",
    next_interval="short_break",
    notification="work-finished",
    auto_stopped=False,
)


class _InlineExecutor(concurrent.futures.Executor):
    def submit(self, fn, /, *args, **kwargs):
        future: concurrent.futures.Future = concurrent.futures.Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as error:
            future.set_exception(error)
        return future


class _AudioStub:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls = 0

    def play(self) -> None:
        self.calls += 1
        if self.error is not None:
            raise self.error


class _NotifierStub:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.classifications: list[str] = []

    def notify(self, classification: str) -> None:
        self.classifications.append(classification)
        if self.error is not None:
            raise self.error


class BoundaryEffectsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger("test.runtime.effects")
        self.logger.propagate = False

    def _effects(self, audio, notifier) -> BoundaryEffects:
        return BoundaryEffects(
            EffectDependencies(audio_cue=audio, notifier=notifier, logger=self.logger),
            executor=_InlineExecutor(),
        )

    def test_plays_chime_and_notifies(self) -> None:
        audio = _AudioStub()
        notifier = _NotifierStub()

        self._effects(audio, notifier).handle_boundary(_BOUNDARY)

        self.assertEqual(1, audio.calls)
        self.assertEqual(["work-finished"], notifier.classifications)

    def test_audio_failure_is_logged_and_notification_still_sent(self) -> None:
        notifier = _NotifierStub()
        effects = self._effects(_AudioStub(RuntimeError("device busy")), notifier)

        with self.assertLogs(self.logger, level="ERROR") as logs:
            effects.handle_boundary(_BOUNDARY)

        self.assertIn("Audio cue failed: device busy", logs.output[0])
        self.assertEqual(["work-finished"], notifier.classifications)

    def test_notifier_failure_is_logged(self) -> None:
        effects = self._effects(None, _NotifierStub(RuntimeError("broken pipe")))

        with self.assertLogs(self.logger, level="ERROR") as logs:
            effects.handle_boundary(_BOUNDARY)

        self.assertTrue(any("Notification failed" in line for line in logs.output))

    def test_slow_notifier_runs_off_the_calling_thread(self) -> None:
        release = threading.Event()
        delivered = threading.Event()

        class _SlowNotifier:
            def notify(self, classification: str) -> None:
                release.wait(timeout=2.0)
                delivered.set()

        effects = BoundaryEffects(
            EffectDependencies(audio_cue=None, notifier=_SlowNotifier(), logger=self.logger)
        )
        try:
            effects.handle_boundary(_BOUNDARY)
            self.assertFalse(delivered.is_set())
            release.set()
            self.assertTrue(delivered.wait(timeout=2.0))
        finally:
            release.set()
            effects.shutdown()

    def test_missing_collaborators_are_skipped(self) -> None:
        with self.assertLogs(self.logger, level="INFO") as logs:
            self._effects(None, None).handle_boundary(_BOUNDARY)
        self.assertIn("work -> short_break", logs.output[0])


if __name__ == "__main__":
    unittest.main()
