import datetime as dt
import json
import unittest

from server.events import StickyEventStore, make_event


class ServerEventsTests(unittest.TestCase):
    def test_make_event_serializes_timestamp_and_payload(self) -> None:
        now = dt.datetime(2026, 2, 21, 10, 0, tzinfo=dt.timezone.utc)
        raw = make_event("pomodoro", now_fn=lambda: now, run_state="idle", time="25:00")
        payload = json.loads(raw)

        self.assertEqual("pomodoro", payload["type"])
        self.assertEqual(now.isoformat(), payload["timestamp"])
        self.assertEqual("idle", payload["run_state"])
        self.assertEqual("25:00", payload["time"])

    def test_sticky_store_ignores_transient_events(self) -> None:
        store = StickyEventStore()
        store.remember("hello", '{"type":"hello"}')
        store.remember("notification", '{"type":"notification"}')
        self.assertEqual([], store.snapshot())

    def test_sticky_store_snapshot_follows_stable_order(self) -> None:
        store = StickyEventStore()
        store.remember("error", '{"type":"error","n":1}')
        store.remember("pomodoro", '{"type":"pomodoro","n":2}')
        store.remember("settings", '{"type":"settings","n":3}')

        decoded_types = [json.loads(item)["type"] for item in store.snapshot()]
        self.assertEqual(["settings", "pomodoro", "error"], decoded_types)

    def test_sticky_store_overwrites_latest_event_by_type(self) -> None:
        store = StickyEventStore()
        store.remember("pomodoro", '{"type":"pomodoro","remaining_seconds":10}')
        store.remember("pomodoro", '{"type":"pomodoro","remaining_seconds":9}')
        snapshot = store.snapshot()

        self.assertEqual(1, len(snapshot))
        self.assertEqual(9, json.loads(snapshot[0])["remaining_seconds"])

    def test_forget_drops_cleared_event(self) -> None:
        store = StickyEventStore()
        store.remember("error", '{"type":"error"}')
        store.remember("pomodoro", '{"type":"pomodoro"}')

        store.forget("error")
        store.forget("settings")

        self.assertEqual(['{"type":"pomodoro"}'], store.snapshot())


if __name__ == "__main__":
    unittest.main()
