import unittest

from pomodoro.config import ConfigurationError, SessionConfig
from pomodoro.sequencer import advance, classify_boundary

DEFAULT_CONFIG = SessionConfig(
    work_duration=1500,
    short_break_duration=300,
    long_break_duration=1200,
    long_break_delay=4,
)


def _as_tuple(step):
    return step.next_duration, step.auto_stop, step.next_index


class SequencerTests(unittest.TestCase):
    def test_work_is_followed_by_running_short_break(self) -> None:
        self.assertEqual((300, False, 2), _as_tuple(advance(1, DEFAULT_CONFIG)))
        self.assertEqual((300, False, 4), _as_tuple(advance(3, DEFAULT_CONFIG)))

    def test_break_is_followed_by_stopped_work(self) -> None:
        step = advance(2, DEFAULT_CONFIG)
        self.assertEqual((1500, True, 3), _as_tuple(step))
        self.assertEqual("work", step.next_interval)

    def test_index_equal_to_delay_triggers_long_break(self) -> None:
        step = advance(4, DEFAULT_CONFIG)
        self.assertEqual((1200, False, 5), _as_tuple(step))
        self.assertEqual("long_break", step.next_interval)

    def test_odd_index_past_delay_takes_short_break(self) -> None:
        self.assertEqual((300, False, 6), _as_tuple(advance(5, DEFAULT_CONFIG)))

    def test_long_break_check_wins_over_parity(self) -> None:
        config = SessionConfig(
            work_duration=5,
            short_break_duration=2,
            long_break_duration=3,
            long_break_delay=2,
        )
        step = advance(2, config)
        self.assertEqual((3, False, 3), _as_tuple(step))

    def test_odd_delay_inserts_long_break_after_work(self) -> None:
        config = SessionConfig(long_break_delay=3)
        self.assertEqual("long_break", advance(3, config).next_interval)
        self.assertEqual("work", advance(4, config).next_interval)

    def test_next_index_always_increments(self) -> None:
        for index in range(1, 20):
            self.assertEqual(index + 1, advance(index, DEFAULT_CONFIG).next_index)

    def test_classify_boundary_uses_finished_index_parity(self) -> None:
        self.assertEqual("work-finished", classify_boundary(1))
        self.assertEqual("break-finished", classify_boundary(2))
        self.assertEqual("work-finished", classify_boundary(7))


class SessionConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = SessionConfig()
        self.assertEqual(1500, config.work_duration)
        self.assertEqual(300, config.short_break_duration)
        self.assertEqual(1200, config.long_break_duration)
        self.assertEqual(4, config.long_break_delay)
        self.assertEqual(1500, config.max_duration)

    def test_rejects_non_positive_values(self) -> None:
        with self.assertRaises(ConfigurationError):
            SessionConfig(work_duration=0)
        with self.assertRaises(ConfigurationError):
            SessionConfig(long_break_delay=-1)

    def test_rejects_non_integer_values(self) -> None:
        with self.assertRaises(ConfigurationError):
            SessionConfig(short_break_duration="300")  # type: ignore[arg-type]
        with self.assertRaises(ConfigurationError):
            SessionConfig(long_break_delay=True)

    def test_from_user_settings_converts_minutes_and_pairs(self) -> None:
        config = SessionConfig.from_user_settings(
            work_minutes=50,
            short_break_minutes=10,
            long_break_minutes=30,
            long_break_pairs=3,
        )
        self.assertEqual(3000, config.work_duration)
        self.assertEqual(600, config.short_break_duration)
        self.assertEqual(1800, config.long_break_duration)
        self.assertEqual(6, config.long_break_delay)

    def test_to_user_settings_inverts_conversion(self) -> None:
        user = SessionConfig(
            work_duration=3000,
            short_break_duration=600,
            long_break_duration=1800,
            long_break_delay=6,
        ).to_user_settings()
        self.assertEqual((50, 10, 30, 3), (
            user.work_minutes,
            user.short_break_minutes,
            user.long_break_minutes,
            user.long_break_pairs,
        ))


if __name__ == "__main__":
    unittest.main()
