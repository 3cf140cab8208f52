"""Tests for Periodic and make_periodic_system."""
from pace import Engine

from pace_schedule import Schedule, make_periodic_system


class TestPeriodicBasics:
    """Basic Periodic behavior tests."""

    def test_periodic_fires_at_interval(self):
        """A 30ms periodic on 10ms ticks fires at ticks 3, 6, 9."""
        engine = Engine(tps=100, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(
            make_periodic_system(schedule, lambda ctx, p: fired.append(ctx.tick_number))
        )
        schedule.every("step", 30.0)
        engine.run(10)

        assert fired == [3, 6, 9]
        assert schedule.has("step")

    def test_restarts_count_after_firing(self):
        """Overshoot is discarded: the next fire is a full interval later."""
        engine = Engine(tps=60, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(make_periodic_system(schedule, lambda ctx, p: fired.append(ctx.now)))
        schedule.every("step", 200.0)

        engine.step(now=250.0)
        engine.step(now=400.0)
        engine.step(now=450.0)
        assert fired == [250.0, 450.0]

    def test_fires_at_most_once_per_tick(self):
        engine = Engine(tps=60, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(make_periodic_system(schedule, lambda ctx, p: fired.append(p.name)))
        schedule.every("step", 10.0)
        engine.step(now=1000.0)

        assert fired == ["step"]

    def test_cancel_stops_firing(self):
        engine = Engine(tps=100, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(
            make_periodic_system(schedule, lambda ctx, p: fired.append(ctx.tick_number))
        )
        schedule.every("step", 20.0)
        engine.run(4)
        schedule.cancel("step")
        engine.run(4)

        assert fired == [2, 4]
