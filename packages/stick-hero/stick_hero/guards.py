"""FSM guards and the round transition table."""
from __future__ import annotations

from typing import TYPE_CHECKING

from pace_fsm import FSMGuards

from stick_hero.types import Phase

if TYPE_CHECKING:
    from stick_hero.game import Game

# Animator slot names
STICK_GROW = "stick.grow"
STICK_DROP = "stick.drop"
HERO_WALK = "hero.walk"
HERO_FALL = "hero.fall"
CAMERA_PAN = "camera.pan"

# Schedule names
SUCCESS_CUE = "success_cue"
WALK_STEP = "walk_step"

# idle -> round.growing (hold pressed)
# growing -> dropping (released, by hand or at max length)
# dropping -> evaluating (stick flat)
# evaluating -> success chain | fail chain
# success: walking -> panning -> settling -> idle
# fail: walking -> falling -> game_over
TRANSITIONS: dict[str, list[list[str]]] = {
    Phase.IDLE.value: [["hold_requested", "round"]],
    Phase.GROWING.value: [["released", Phase.DROPPING.value]],
    Phase.DROPPING.value: [["stick_down", Phase.EVALUATING.value]],
    Phase.EVALUATING.value: [
        ["bridge_holds", "round.success"],
        ["always", "round.fail"],
    ],
    Phase.WALKING_SUCCESS.value: [["hero_arrived", Phase.PANNING.value]],
    Phase.PANNING.value: [["camera_settled", Phase.SETTLING.value]],
    Phase.SETTLING.value: [["always", Phase.IDLE.value]],
    Phase.WALKING_FAIL.value: [["hero_arrived", Phase.FALLING.value]],
    Phase.FALLING.value: [["hero_landed", Phase.GAME_OVER.value]],
}

INITIAL: dict[str, str] = {
    "round": Phase.GROWING.value,
    "round.success": Phase.WALKING_SUCCESS.value,
    "round.fail": Phase.WALKING_FAIL.value,
}


def make_guards() -> FSMGuards:
    """Guards read the Game passed as the FSM subject."""
    g = FSMGuards()

    @g.guard("hold_requested")
    def hold_requested(game: Game) -> bool:
        return game.hold_requested

    @g.guard("released")
    def released(game: Game) -> bool:
        return game.session is not None and not game.session.holding

    @g.guard("bridge_holds")
    def bridge_holds(game: Game) -> bool:
        return game.bridge is not None and game.bridge.success

    # Stages that wait on an animation end when its slot empties.
    g.register("stick_down", lambda game: not game.animator.has(STICK_DROP))
    g.register("hero_arrived", lambda game: not game.animator.has(HERO_WALK))
    g.register("camera_settled", lambda game: not game.animator.has(CAMERA_PAN))
    g.register("hero_landed", lambda game: not game.animator.has(HERO_FALL))
    g.register("always", lambda game: True)
    return g
