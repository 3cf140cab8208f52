"""pace - A wall-clock driven tick loop in Python."""

from pace.clock import Clock
from pace.engine import Engine
from pace.types import ClockError, System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
    "ClockError",
]
