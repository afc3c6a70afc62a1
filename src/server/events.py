"""Utilities for serializing UI events and preserving sticky state."""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Iterable

from contracts.ui_protocol import STICKY_EVENT_ORDER, STICKY_EVENT_TYPES


def make_event(
    event_type: str,
    *,
    now_fn: Callable[[], datetime] | None = None,
    **payload: Any,
) -> str:
    """Serialize an event payload with type and timestamp for websocket delivery."""
    now = now_fn() if now_fn is not None else datetime.now(timezone.utc)
    return json.dumps(
        {
            "type": event_type,
            "timestamp": now.isoformat(),
            **payload,
        }
    )


class StickyEventStore:
    """Thread-safe cache of the latest sticky events, replayed to new clients."""
    def __init__(
        self,
        *,
        order: Iterable[str] = STICKY_EVENT_ORDER,
        sticky_types: frozenset[str] = STICKY_EVENT_TYPES,
    ):
        self._order = tuple(order)
        self._sticky_types = sticky_types
        self._events: dict[str, str] = {}
        self._lock = threading.Lock()

    def remember(self, event_type: str, message: str) -> None:
        if event_type not in self._sticky_types:
            return
        with self._lock:
            self._events[event_type] = message

    def forget(self, event_type: str) -> None:
        with self._lock:
            self._events.pop(event_type, None)

    def snapshot(self) -> list[str]:
        with self._lock:
            return [self._events[key] for key in self._order if key in self._events]
