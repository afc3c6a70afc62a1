import threading
import time
import unittest

from runtime.ticks import IntervalTickSource, ManualTickSource, TickEvent


class _Collector:
    def __init__(self, wanted: int) -> None:
        self.ticks: list[TickEvent] = []
        self._wanted = wanted
        self.done = threading.Event()

    def __call__(self, tick: TickEvent) -> None:
        self.ticks.append(tick)
        if len(self.ticks) >= self._wanted:
            self.done.set()


class IntervalTickSourceTests(unittest.TestCase):
    def test_posts_sequenced_ticks_while_running(self) -> None:
        collector = _Collector(wanted=3)
        source = IntervalTickSource(collector, lambda: True, interval_seconds=0.01)

        source.start()
        try:
            self.assertTrue(collector.done.wait(timeout=2.0))
        finally:
            source.stop()

        self.assertFalse(source.is_alive)
        sequences = [tick.sequence for tick in collector.ticks]
        self.assertEqual(list(range(1, len(sequences) + 1)), sequences)

    def test_no_ticks_while_timer_is_not_running(self) -> None:
        collector = _Collector(wanted=1)
        source = IntervalTickSource(collector, lambda: False, interval_seconds=0.01)

        source.start()
        time.sleep(0.1)
        source.stop()

        self.assertEqual([], collector.ticks)

    def test_ticks_begin_after_timer_starts(self) -> None:
        running = threading.Event()
        collector = _Collector(wanted=2)
        source = IntervalTickSource(collector, running.is_set, interval_seconds=0.01)

        source.start()
        try:
            time.sleep(0.05)
            self.assertEqual([], collector.ticks)
            running.set()
            self.assertTrue(collector.done.wait(timeout=2.0))
        finally:
            source.stop()

    def test_rejects_non_positive_interval(self) -> None:
        with self.assertRaises(ValueError):
            IntervalTickSource(lambda _tick: None, lambda: True, interval_seconds=0)

    def test_stop_without_start_is_a_no_op(self) -> None:
        source = IntervalTickSource(lambda _tick: None, lambda: True)
        source.stop()
        self.assertFalse(source.is_alive)


class ManualTickSourceTests(unittest.TestCase):
    def test_fire_skips_ticks_while_not_running(self) -> None:
        state = {"running": False}
        posted: list[TickEvent] = []
        source = ManualTickSource(posted.append, lambda: state["running"])

        self.assertEqual(0, source.fire(2))
        state["running"] = True
        self.assertEqual(3, source.fire(3))
        self.assertEqual([1, 2, 3], [tick.sequence for tick in posted])

    def test_start_and_stop_toggle_started(self) -> None:
        source = ManualTickSource(lambda _tick: None, lambda: True)
        source.start()
        self.assertTrue(source.started)
        source.stop()
        self.assertFalse(source.started)


if __name__ == "__main__":
    unittest.main()
