"""Game-specific systems."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from stick_hero.types import Phase

if TYPE_CHECKING:
    from pace import TickContext

    from stick_hero.game import Game


def make_grow_cue_system(game: Game) -> Callable[[TickContext], None]:
    """Return a system that sometimes fires a grow cue while the stick grows."""

    def grow_cue_system(ctx: TickContext) -> None:
        if game.phase is not Phase.GROWING or game.session is None:
            return
        if not game.session.holding:
            return
        if ctx.random.random() < game.config.grow_cue_chance:
            game.cue("grow")

    return grow_cue_system
