"""Tests for GameConfig defaults and validation."""
import dataclasses
import random

import pytest

from stick_hero import Game, GameConfig, Phase


class LowRandom(random.Random):
    """randint always returns the lower bound."""

    def randint(self, a, b):
        return a


def test_defaults():
    config = GameConfig()
    assert config.gap_range == (60, 160)
    assert config.width_range == (50, 90)
    assert config.first_width_range == (70, 90)
    assert config.grow_rate == 0.2
    assert config.max_stick_length == 300.0
    assert config.drop_duration == 400.0
    assert config.walk_speed == 0.15
    assert config.pan_duration == 600.0


def test_frozen():
    config = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.grow_rate = 1.0  # type: ignore[misc]


def test_degenerate_range_allowed():
    config = GameConfig(gap_range=(100, 100))
    assert config.gap_range == (100, 100)


@pytest.mark.parametrize(
    "overrides",
    [
        {"gap_range": (160, 60)},
        {"width_range": (90, 50)},
        {"first_width_range": (-5, 10)},
        {"grow_rate": 0.0},
        {"walk_speed": -0.1},
        {"drop_duration": 0.0},
        {"max_stick_length": 0.0},
        {"grow_cue_chance": 1.5},
        {"walk_step_interval": 0.0},
        {"success_cue_duration": -1.0},
        {"fall_depth": -10.0},
        {"fail_walk_shortfall": -5.0},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        GameConfig(**overrides)


def test_zero_shortfall_and_cue_allowed():
    config = GameConfig(fail_walk_shortfall=0.0, success_cue_duration=0.0)
    assert config.fail_walk_shortfall == 0.0


def test_short_footstep_interval_plays_a_full_round():
    game = Game(GameConfig(walk_step_interval=1.0), tps=100, rng=LowRandom())
    game.hold_start()
    game.run(40)
    game.hold_end()
    for _ in range(1000):
        if game.phase is Phase.IDLE:
            break
        game.step()
    assert game.score == 1
