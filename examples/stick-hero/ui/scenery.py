"""Drifting clouds. Runs on its own engine, independent of game time."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from pace import Engine, TickContext
from pace_tween import Animator, Tween, make_tween_system
from ui.constants import (
    CLOUD_COLOR,
    CLOUD_CROSS_MS,
    CLOUD_H,
    CLOUD_W,
    CLOUD_Y_RANGE,
    SCENE_W,
)

CLOUD_SLOT = "cloud"


@dataclass
class Cloud:
    x: float
    y: float


class Scenery:
    """One cloud at a time crosses the sky; the next starts when it leaves."""

    def __init__(self, width: float = SCENE_W, seed: int | None = None) -> None:
        self.width = width
        self.engine = Engine(tps=30, seed=seed)
        self.animator = Animator()
        self.cloud = Cloud(x=-CLOUD_W, y=CLOUD_Y_RANGE[0])
        self.engine.add_system(make_tween_system(self.animator, self._on_complete))
        self._spawn()

    def _spawn(self) -> None:
        rng = self.engine.random
        self.cloud.y = rng.randint(*CLOUD_Y_RANGE)
        duration = rng.uniform(*CLOUD_CROSS_MS)
        self.animator.start(
            CLOUD_SLOT, self.cloud, Tween("x", -CLOUD_W, self.width + CLOUD_W, duration)
        )

    def _on_complete(self, ctx: TickContext, name: str, anim: Tween) -> None:
        self._spawn()

    def sync(self, now: float) -> None:
        self.engine.clock.reset(0, now)

    def update(self, now: float) -> None:
        self.engine.step(now)

    def draw(self, surface: pygame.Surface) -> None:
        x, y = int(self.cloud.x), int(self.cloud.y)
        pygame.draw.ellipse(surface, CLOUD_COLOR, (x, y, CLOUD_W, CLOUD_H))
        pygame.draw.ellipse(
            surface, CLOUD_COLOR, (x + CLOUD_W // 4, y - CLOUD_H // 2, CLOUD_W // 2, CLOUD_H)
        )
