"""Tween and Ramp animations. Durations and rates are in milliseconds."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tween:
    """Fixed-duration interpolation of one numeric field."""

    field: str
    start_val: float
    end_val: float
    duration: float
    elapsed: float = 0.0
    easing: str = "linear"

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)

    @property
    def done(self) -> bool:
        return self.progress >= 1.0


@dataclass
class Ramp:
    """Constant-rate growth of one numeric field, finishing at ``limit``."""

    field: str
    rate: float
    limit: float
