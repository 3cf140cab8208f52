"""Tests for engine lifecycle, tick counting, and pacing."""

import random

from pace.engine import Engine


# --- Initialization ---

def test_engine_init_defaults():
    engine = Engine()
    assert engine.clock.tps == 60
    assert engine.clock.tick_number == 0
    assert isinstance(engine.seed, int)


def test_engine_seed_is_reproducible():
    a = Engine(seed=7)
    b = Engine(seed=7)
    assert [a.random.randint(0, 100) for _ in range(5)] == [
        b.random.randint(0, 100) for _ in range(5)
    ]


def test_engine_injected_rng():
    rng = random.Random(3)
    engine = Engine(rng=rng)
    assert engine.random is rng
    assert engine.seed is None

    seen = []
    engine.add_system(lambda ctx: seen.append(ctx.random))
    engine.step()
    assert seen == [rng]


# --- System registration ---

def test_systems_run_in_order():
    engine = Engine()
    order = []

    engine.add_system(lambda ctx: order.append("first"))
    engine.add_system(lambda ctx: order.append("second"))
    engine.add_system(lambda ctx: order.append("third"))
    engine.step()
    assert order == ["first", "second", "third"]


# --- step() ---

def test_step_advances_one_tick():
    engine = Engine(tps=100)
    engine.step()
    assert engine.clock.tick_number == 1
    assert engine.clock.now == 10.0


def test_step_with_timestamp_passes_real_dt():
    engine = Engine(tps=60)
    dts = []
    engine.add_system(lambda ctx: dts.append(ctx.dt))
    engine.step(now=12.0)
    engine.step(now=45.0)
    engine.step(now=45.0)
    assert dts == [12.0, 33.0, 0.0]


def test_step_does_not_call_hooks():
    engine = Engine()
    hooks_called = []

    engine.on_start(lambda c: hooks_called.append("start"))
    engine.on_stop(lambda c: hooks_called.append("stop"))
    engine.step()
    assert hooks_called == []


# --- run(n) ---

def test_run_n_ticks():
    engine = Engine()
    tick_numbers = []
    engine.add_system(lambda ctx: tick_numbers.append(ctx.tick_number))
    engine.run(5)
    assert tick_numbers == [1, 2, 3, 4, 5]


def test_run_calls_start_and_stop_hooks():
    engine = Engine()
    events = []

    engine.on_start(lambda c: events.append("start"))
    engine.on_stop(lambda c: events.append("stop"))
    engine.add_system(lambda c: events.append(f"tick-{c.tick_number}"))
    engine.run(2)
    assert events == ["start", "tick-1", "tick-2", "stop"]


# --- stop requests ---

def test_request_stop_skips_remaining_systems():
    engine = Engine()
    calls = []

    def stopper(ctx):
        calls.append("stopper")
        ctx.request_stop()

    engine.add_system(stopper)
    engine.add_system(lambda ctx: calls.append("after"))
    engine.run(10)
    assert calls == ["stopper"]
    assert engine.clock.tick_number == 1


def test_run_forever_uses_time_source():
    engine = Engine(tps=1000)
    stamps = iter([100.0, 100.0, 104.0, 104.0, 109.0, 109.0])
    dts = []

    def record(ctx):
        dts.append(ctx.dt)
        if len(dts) == 2:
            ctx.request_stop()

    engine.add_system(record)
    engine.run_forever(time_fn=lambda: next(stamps))
    assert dts == [0.0, 4.0]
