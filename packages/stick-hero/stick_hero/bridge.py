"""Pure geometry: bridge evaluation and hero walk targets."""
from __future__ import annotations

from dataclasses import dataclass

from stick_hero.config import GameConfig
from stick_hero.types import Platform


@dataclass(frozen=True, slots=True)
class BridgeResult:
    success: bool
    end_x: float


def evaluate_bridge(pivot_x: float, stick_length: float, target: Platform) -> BridgeResult:
    """Judge a dropped stick. Landing exactly on either edge counts."""
    end_x = pivot_x + stick_length
    return BridgeResult(success=target.x <= end_x <= target.right, end_x=end_x)


def stand_x(platform: Platform, config: GameConfig) -> float:
    """Where the hero stands on a freshly set up first platform."""
    return platform.x + min(config.hero_stand_inset, platform.width - config.hero_width)


def walk_target(result: BridgeResult, target: Platform, config: GameConfig) -> float:
    """Where the hero stops walking after the bridge has been judged.

    A missed bridge always walks to just short of the stick tip, even when
    the tip overshoots the target platform.
    """
    if result.success:
        return target.x + min(config.hero_land_inset, target.width - config.hero_land_inset)
    return result.end_x - config.fail_walk_shortfall


def walk_duration(start_x: float, end_x: float, config: GameConfig) -> float:
    return abs(end_x - start_x) / config.walk_speed


def camera_target(platform: Platform, config: GameConfig) -> float:
    """Camera offset that puts ``platform`` ``camera_margin`` px from the left edge."""
    return -(platform.x - config.camera_margin)
