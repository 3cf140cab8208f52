"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning for one game. Distances in px, times in ms.

    Attributes:
        start_x: Left edge of the first platform.
        first_width_range: Inclusive width bounds of the first platform.
        gap_range: Inclusive bounds of the gap before each new platform.
        width_range: Inclusive width bounds of every later platform.
        grow_rate: Stick growth in px per ms of holding.
        max_stick_length: Growth cap; reaching it releases automatically.
        drop_duration: Time for the stick to rotate from 0 to 90 degrees.
        walk_speed: Hero speed in px per ms.
        pan_duration: Camera pan time after a successful crossing.
        camera_margin: Distance kept left of the reached platform after a pan.
        fall_duration: Time the hero takes to fall after a miss.
        fall_depth: Distance the hero falls.
        hero_stand_inset: Hero offset onto the first platform.
        hero_land_inset: Hero offset onto a platform reached by walking.
        hero_width: Hero width, used to keep the hero on narrow platforms.
        fail_walk_shortfall: A failed walk stops this far before the stick tip.
        success_cue_duration: How long the hero cheers after a crossing.
        walk_step_interval: Time between footstep cues while walking.
        grow_cue_chance: Chance per growing tick of a grow cue.
    """

    game_width: float = 400.0
    start_x: float = 30.0
    first_width_range: tuple[int, int] = (70, 90)
    gap_range: tuple[int, int] = (60, 160)
    width_range: tuple[int, int] = (50, 90)
    grow_rate: float = 0.2
    max_stick_length: float = 300.0
    drop_duration: float = 400.0
    walk_speed: float = 0.15
    pan_duration: float = 600.0
    camera_margin: float = 30.0
    fall_duration: float = 800.0
    fall_depth: float = 250.0
    hero_stand_inset: float = 20.0
    hero_land_inset: float = 25.0
    hero_width: float = 22.0
    fail_walk_shortfall: float = 10.0
    success_cue_duration: float = 400.0
    walk_step_interval: float = 200.0
    grow_cue_chance: float = 0.1

    def __post_init__(self) -> None:
        for name in ("first_width_range", "gap_range", "width_range"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} is inverted: {low} > {high}")
            if low < 0:
                raise ValueError(f"{name} must not be negative")
        for name in (
            "grow_rate", "max_stick_length", "walk_speed",
            "drop_duration", "pan_duration", "fall_duration",
            "walk_step_interval",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("success_cue_duration", "fall_depth", "fail_walk_shortfall"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if not 0.0 <= self.grow_cue_chance <= 1.0:
            raise ValueError("grow_cue_chance must be within [0, 1]")
