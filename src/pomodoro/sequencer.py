"""Pure sequencing rules deciding which interval follows the current one."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SessionConfig
from .constants import (
    INTERVAL_LONG_BREAK,
    INTERVAL_SHORT_BREAK,
    INTERVAL_WORK,
    NOTIFY_BREAK_FINISHED,
    NOTIFY_WORK_FINISHED,
)


@dataclass(frozen=True)
class SequenceStep:
    """Outcome of finishing (or skipping) the interval at `next_index - 1`."""
    next_duration: int
    auto_stop: bool
    next_index: int
    next_interval: str


def advance(current_index: int, config: SessionConfig) -> SequenceStep:
    """Decide the next interval after `current_index` completes.

    Session indexes are 1-based and count breaks too: 1 work, 2 break,
    3 work, ... The long-break delay is compared against the index itself,
    so a delay of 8 inserts the long break after the eighth session.
    Every break is followed by work with the cycle stopped, so the user
    resumes work explicitly.
    """
    next_index = current_index + 1

    if current_index == config.long_break_delay:
        return SequenceStep(
            next_duration=config.long_break_duration,
            auto_stop=False,
            next_index=next_index,
            next_interval=INTERVAL_LONG_BREAK,
        )

    if current_index % 2 != 0:
        return SequenceStep(
            next_duration=config.short_break_duration,
            auto_stop=False,
            next_index=next_index,
            next_interval=INTERVAL_SHORT_BREAK,
        )

    return SequenceStep(
        next_duration=config.work_duration,
        auto_stop=True,
        next_index=next_index,
        next_interval=INTERVAL_WORK,
    )


def classify_boundary(finished_index: int) -> str:
    """Notification class for the boundary after `finished_index`."""
    if finished_index % 2 != 0:
        return NOTIFY_WORK_FINISHED
    return NOTIFY_BREAK_FINISHED
