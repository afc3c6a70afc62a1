"""Runtime engine exports."""

from .loop import RuntimeBootstrap, RuntimeEngine
from .ticks import IntervalTickSource, ManualTickSource, TickEvent

__all__ = [
    "IntervalTickSource",
    "ManualTickSource",
    "RuntimeBootstrap",
    "RuntimeEngine",
    "TickEvent",
]
