"""System factories for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pace_signal.bus import SignalBus

if TYPE_CHECKING:
    from pace import TickContext


def make_signal_system(bus: SignalBus) -> Callable[[TickContext], None]:
    def signal_system(ctx: TickContext) -> None:
        bus.flush()

    return signal_system
