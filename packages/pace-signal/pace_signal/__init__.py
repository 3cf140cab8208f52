"""pace-signal - In-process event bus for the pace tick loop."""
from __future__ import annotations

from pace_signal.bus import WILDCARD, SignalBus
from pace_signal.systems import make_signal_system

__all__ = ["SignalBus", "WILDCARD", "make_signal_system"]
