"""Callbacks for animation completion and scheduled cues."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from stick_hero.guards import (
    CAMERA_PAN,
    HERO_WALK,
    STICK_DROP,
    STICK_GROW,
    SUCCESS_CUE,
    WALK_STEP,
)

if TYPE_CHECKING:
    from pace import TickContext
    from pace_schedule import Periodic, Timer
    from pace_tween.systems import Animation

    from stick_hero.game import Game


def make_on_anim_complete(game: Game) -> Callable[[TickContext, str, Animation], None]:
    """Create the tween on_complete callback.

    The round machine notices finished animations through its guards; this
    only handles side effects and telemetry.
    """

    def on_anim_complete(ctx: TickContext, name: str, anim: Animation) -> None:
        if name == STICK_GROW:
            # Hitting the cap behaves exactly like letting go.
            if game.session is not None:
                game.session.holding = False
                game.session.auto_released = True
            game.bus.publish("max_length", length=game.stick.length)
        elif name == STICK_DROP:
            game.bus.publish("dropped", length=game.stick.length)
        elif name == HERO_WALK:
            game.schedule.cancel(WALK_STEP)
            game.hero.pose = "standing"
            game.bus.publish("walk_finished", x=game.hero.x)
        elif name == CAMERA_PAN:
            game.bus.publish("camera_panned", offset_x=game.camera.offset_x)

    return on_anim_complete


def make_on_timer_fire(game: Game) -> Callable[[TickContext, Timer], None]:
    """Create the timer on_fire callback that ends the success pose."""

    def on_timer_fire(ctx: TickContext, timer: Timer) -> None:
        if timer.name == SUCCESS_CUE and game.hero.pose == "cheering":
            game.hero.pose = "standing"

    return on_timer_fire


def make_on_periodic_fire(game: Game) -> Callable[[TickContext, Periodic], None]:
    """Create the periodic on_fire callback that paces footstep cues."""

    def on_periodic_fire(ctx: TickContext, periodic: Periodic) -> None:
        if periodic.name == WALK_STEP:
            game.cue("walk")

    return on_periodic_fire
