"""Engine - core loop, pacing, and lifecycle hooks."""

import os
import random
import time
from typing import Callable

from pace.clock import Clock
from pace.types import System, TickContext


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Engine:
    def __init__(
        self,
        tps: int = 60,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False

        if rng is not None:
            self._seed = seed
            self._rng = rng
        else:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            self._seed = seed
            self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, now: float | None = None) -> None:
        self._clock.advance(now)
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self, now: float | None = None) -> None:
        """Run one tick. ``now`` is a millisecond timestamp; omitted means one nominal step."""
        self._stop_requested = False
        self._tick(now)

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in self._start_hooks:
            hook(ctx)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in self._stop_hooks:
            hook(ctx)

    def run_forever(self, time_fn: Callable[[], float] = _monotonic_ms) -> None:
        """Tick against real time until a system requests a stop."""
        self._stop_requested = False
        self._clock.reset(self._clock.tick_number, time_fn())
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in self._start_hooks:
            hook(ctx)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time_fn()
            self._tick(start)
            if self._stop_requested:
                break
            elapsed = time_fn() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time / 1000.0)

        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in self._stop_hooks:
            hook(ctx)
