"""Integration tests for the signal system with the tick loop."""
from __future__ import annotations

from pace import Engine
from pace_signal import SignalBus, make_signal_system


def test_system_flushes_bus():
    """Signals published by an earlier system arrive in the same tick."""
    bus = SignalBus()
    engine = Engine(tps=20, seed=42)
    received = []

    bus.subscribe("tick_event", lambda n, d: received.append((n, d)))
    engine.add_system(lambda ctx: bus.publish("tick_event", tick=ctx.tick_number))
    engine.add_system(make_signal_system(bus))

    engine.run(1)

    assert received == [("tick_event", {"tick": 1})]


def test_multi_tick():
    """Only ticks that publish deliver anything."""
    bus = SignalBus()
    engine = Engine(tps=20, seed=42)
    received = []

    bus.subscribe("odd", lambda n, d: received.append(d["tick"]))

    def publisher(ctx):
        if ctx.tick_number % 2:
            bus.publish("odd", tick=ctx.tick_number)

    engine.add_system(publisher)
    engine.add_system(make_signal_system(bus))
    engine.run(5)

    assert received == [1, 3, 5]
