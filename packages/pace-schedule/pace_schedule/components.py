"""Timer, Periodic and the Schedule that holds them."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """One-shot countdown. Fires when remaining reaches 0, then is dropped."""

    name: str
    remaining: float


@dataclass
class Periodic:
    """Recurring timer. Fires every `interval` ms until cancelled."""

    name: str
    interval: float
    elapsed: float = 0.0


class Schedule:
    """Named timers and periodics. Re-arming a name replaces it."""

    def __init__(self) -> None:
        self.timers: dict[str, Timer] = {}
        self.periodics: dict[str, Periodic] = {}

    def after(self, name: str, delay: float) -> Timer:
        timer = Timer(name=name, remaining=delay)
        self.timers[name] = timer
        return timer

    def every(self, name: str, interval: float) -> Periodic:
        if interval <= 0:
            raise ValueError("interval must be positive")
        periodic = Periodic(name=name, interval=interval)
        self.periodics[name] = periodic
        return periodic

    def cancel(self, name: str) -> None:
        self.timers.pop(name, None)
        self.periodics.pop(name, None)

    def has(self, name: str) -> bool:
        return name in self.timers or name in self.periodics

    def clear(self) -> None:
        self.timers.clear()
        self.periodics.clear()
