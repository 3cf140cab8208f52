"""Immutable render data handed to whatever draws the game."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stick_hero.types import Phase, Platform

if TYPE_CHECKING:
    from stick_hero.game import Game


@dataclass(frozen=True, slots=True)
class StickView:
    pivot_x: float
    length: float
    angle: float


@dataclass(frozen=True, slots=True)
class HeroView:
    x: float
    fall: float
    pose: str


@dataclass(frozen=True, slots=True)
class Frame:
    platforms: tuple[Platform, ...]
    current_index: int
    stick: StickView
    hero: HeroView
    camera_offset: float
    score: int
    phase: Phase
    message: str
    game_over: bool


def take_snapshot(game: Game) -> Frame:
    return Frame(
        platforms=game.track.platforms(),
        current_index=game.track.current_index,
        stick=StickView(game.stick.pivot_x, game.stick.length, game.stick.angle),
        hero=HeroView(game.hero.x, game.hero.fall, game.hero.pose),
        camera_offset=game.camera.offset_x,
        score=game.scoreboard.score,
        phase=game.phase,
        message=game.message,
        game_over=game.game_over,
    )
