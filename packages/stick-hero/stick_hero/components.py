"""Mutable game pieces. Animations write their numeric fields directly."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Stick:
    """The bridge stick. ``angle`` is 0 when upright and 90 when laid flat."""

    pivot_x: float = 0.0
    length: float = 0.0
    angle: float = 0.0

    def reset(self, pivot_x: float) -> None:
        self.pivot_x = pivot_x
        self.length = 0.0
        self.angle = 0.0


@dataclass
class Hero:
    """Hero position. ``fall`` is how far below platform level the hero is."""

    x: float = 0.0
    fall: float = 0.0
    pose: str = "standing"


@dataclass
class Camera:
    offset_x: float = 0.0


@dataclass
class RoundSession:
    """Per-attempt input state. Only exists while a round is running."""

    holding: bool
    hold_started_at: float
    auto_released: bool = False


@dataclass
class Scoreboard:
    """Crossing count. Game over is the GAME_OVER phase, not a flag here."""

    score: int = 0

    def award(self) -> int:
        self.score += 1
        return self.score

    def reset(self) -> None:
        self.score = 0
