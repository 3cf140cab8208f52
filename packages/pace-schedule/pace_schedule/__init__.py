"""pace-schedule - Millisecond timers for the pace tick loop."""
from __future__ import annotations

from pace_schedule.components import Periodic, Schedule, Timer
from pace_schedule.systems import make_periodic_system, make_timer_system

__all__ = ["Timer", "Periodic", "Schedule", "make_timer_system", "make_periodic_system"]
