"""Shared types for the pace tick loop."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    """Per-tick view of time. All durations are milliseconds."""

    tick_number: int
    now: float
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


class ClockError(ValueError):
    """Raised when a tick timestamp goes backwards."""

    def __init__(self, previous: float, now: float) -> None:
        self.previous = previous
        self.now = now
        super().__init__(f"Timestamp {now} is earlier than previous tick {previous}")


System = Callable[[TickContext], None]
