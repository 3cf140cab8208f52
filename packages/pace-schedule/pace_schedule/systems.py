"""System factories for timer and periodic processing."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pace_schedule.components import Periodic, Schedule, Timer

if TYPE_CHECKING:
    from pace import TickContext


def make_timer_system(
    schedule: Schedule,
    on_fire: Callable[[TickContext, Timer], None],
) -> Callable[[TickContext], None]:
    """Return a system that counts Timers down by dt and fires callbacks at zero."""

    def timer_system(ctx: TickContext) -> None:
        for name, timer in list(schedule.timers.items()):
            if schedule.timers.get(name) is not timer:
                continue
            timer.remaining -= ctx.dt
            if timer.remaining <= 0:
                del schedule.timers[name]
                on_fire(ctx, timer)

    return timer_system


def make_periodic_system(
    schedule: Schedule,
    on_fire: Callable[[TickContext, Periodic], None],
) -> Callable[[TickContext], None]:
    """Return a system that accumulates Periodic elapsed time and fires on interval."""

    def periodic_system(ctx: TickContext) -> None:
        for name, periodic in list(schedule.periodics.items()):
            if schedule.periodics.get(name) is not periodic:
                continue
            periodic.elapsed += ctx.dt
            if periodic.elapsed >= periodic.interval:
                periodic.elapsed = 0.0
                on_fire(ctx, periodic)

    return periodic_system
