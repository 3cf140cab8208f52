"""Shared types for the stick hero game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    """Every state the round machine can be in.

    Round stages share the ``round.`` prefix, so "a round is active" is just
    a prefix test, and the success and fail chains are ``round.success.*``
    and ``round.fail.*``.
    """

    IDLE = "idle"
    GROWING = "round.growing"
    DROPPING = "round.dropping"
    EVALUATING = "round.evaluating"
    WALKING_SUCCESS = "round.success.walking"
    PANNING = "round.success.panning"
    SETTLING = "round.success.settling"
    WALKING_FAIL = "round.fail.walking"
    FALLING = "round.fail.falling"
    GAME_OVER = "game_over"

    @property
    def in_round(self) -> bool:
        return self.value.startswith("round.")

    @property
    def animating(self) -> bool:
        return self.in_round and self is not Phase.GROWING


@dataclass(frozen=True, slots=True)
class Platform:
    x: float
    width: float

    @property
    def right(self) -> float:
        return self.x + self.width


class TrackError(IndexError):
    """Raised when the track is asked for a platform it does not hold."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"No platform at index {index} (track has {size})")
