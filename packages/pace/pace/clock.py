"""Clock that measures real elapsed time between ticks."""

import random
from typing import Callable

from pace.types import ClockError, TickContext


class Clock:
    def __init__(self, tps: int, start: float = 0.0) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1000.0 / tps
        self._tick_number = 0
        self._origin = start
        self._now = start
        self._step = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        """Nominal step length in ms, used when a tick carries no timestamp."""
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def now(self) -> float:
        return self._now

    @property
    def elapsed(self) -> float:
        """Milliseconds since the clock origin."""
        return self._now - self._origin

    @property
    def last_step(self) -> float:
        """Length in ms of the most recent tick."""
        return self._step

    def advance(self, now: float | None = None) -> int:
        if now is None:
            now = self._now + self._dt
        elif now < self._now:
            raise ClockError(self._now, now)
        self._step = now - self._now
        self._now = now
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            now=self._now,
            dt=self._step,
            elapsed=self.elapsed,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self, tick_number: int = 0, now: float = 0.0) -> None:
        self._tick_number = tick_number
        self._origin = now
        self._now = now
        self._step = 0.0
