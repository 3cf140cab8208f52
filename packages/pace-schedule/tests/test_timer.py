"""Tests for Timer, Schedule and make_timer_system."""
import pytest
from pace import Engine

from pace_schedule import Schedule, make_timer_system


class TestTimerBasics:
    """Basic Timer behavior tests."""

    def test_timer_fires_when_time_runs_out(self):
        """A 50ms timer fires on the 5th 10ms tick."""
        engine = Engine(tps=100, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(
            make_timer_system(schedule, lambda ctx, t: fired.append((ctx.tick_number, t.name)))
        )
        schedule.after("cue", 50.0)

        engine.run(4)
        assert fired == []

        engine.step()
        assert fired == [(5, "cue")]

    def test_timer_fires_exactly_once(self):
        engine = Engine(tps=100, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(make_timer_system(schedule, lambda ctx, t: fired.append(t.name)))
        schedule.after("once", 30.0)
        engine.run(10)

        assert fired == ["once"]
        assert not schedule.has("once")

    def test_timer_counts_real_elapsed_time(self):
        engine = Engine(tps=60, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(make_timer_system(schedule, lambda ctx, t: fired.append(ctx.now)))
        schedule.after("late", 100.0)

        engine.step(now=40.0)
        engine.step(now=99.0)
        assert fired == []
        engine.step(now=250.0)
        assert fired == [250.0]

    def test_rearm_replaces_timer(self):
        engine = Engine(tps=100, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(make_timer_system(schedule, lambda ctx, t: fired.append(ctx.tick_number)))
        schedule.after("cue", 30.0)
        engine.run(2)
        schedule.after("cue", 30.0)
        engine.run(2)
        assert fired == []
        engine.step()
        assert fired == [5]

    def test_cancel(self):
        engine = Engine(tps=100, seed=42)
        schedule = Schedule()
        fired = []

        engine.add_system(make_timer_system(schedule, lambda ctx, t: fired.append(t.name)))
        schedule.after("cue", 30.0)
        engine.step()
        schedule.cancel("cue")
        engine.run(5)

        assert fired == []

    def test_callback_may_rearm_same_name(self):
        engine = Engine(tps=100, seed=42)
        schedule = Schedule()
        fired = []

        def on_fire(ctx, timer):
            fired.append(ctx.tick_number)
            if len(fired) < 3:
                schedule.after(timer.name, 20.0)

        engine.add_system(make_timer_system(schedule, on_fire))
        schedule.after("loop", 20.0)
        engine.run(10)

        assert fired == [2, 4, 6]


class TestSchedule:
    """Schedule bookkeeping."""

    def test_has_and_clear(self):
        schedule = Schedule()
        schedule.after("a", 10.0)
        schedule.every("b", 10.0)
        assert schedule.has("a")
        assert schedule.has("b")
        schedule.clear()
        assert not schedule.has("a")
        assert not schedule.has("b")

    def test_every_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            Schedule().every("bad", 0.0)
