"""Stage entry actions for the round machine and the round finalizer."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pace_tween import Ramp, Tween

from stick_hero.bridge import (
    BridgeResult,
    camera_target,
    evaluate_bridge,
    walk_duration,
    walk_target,
)
from stick_hero.components import RoundSession
from stick_hero.guards import (
    CAMERA_PAN,
    HERO_FALL,
    HERO_WALK,
    STICK_DROP,
    STICK_GROW,
    SUCCESS_CUE,
    WALK_STEP,
)
from stick_hero.types import Phase

if TYPE_CHECKING:
    from pace import TickContext

    from stick_hero.game import Game

MSG_IDLE = "Hold to grow the stick, release to drop"
MSG_GROWING = "Growing... release to drop"
MSG_DROPPING = "Dropping..."
MSG_SUCCESS = "Perfect! Hold to grow again"
MSG_FELL = "Oops! You fell."
MSG_GAME_OVER = "Game Over"


def _begin_round(game: Game, ctx: TickContext) -> None:
    game.hold_requested = False
    game.session = RoundSession(holding=game.hold_signal, hold_started_at=ctx.now)
    game.stick.reset(game.track.pivot_x)
    if game.session.holding:
        game.animator.start(
            STICK_GROW,
            game.stick,
            Ramp("length", rate=game.config.grow_rate, limit=game.config.max_stick_length),
        )
    game.message = MSG_GROWING
    game.bus.publish("round_started", index=game.track.current_index, pivot_x=game.stick.pivot_x)


def _drop_stick(game: Game, ctx: TickContext) -> None:
    game.animator.cancel(STICK_GROW)
    session = game.session
    auto = session is not None and session.auto_released
    held = ctx.now - session.hold_started_at if session is not None else 0.0
    game.bus.publish("released", length=game.stick.length, auto=auto, held_ms=held)
    game.message = MSG_DROPPING
    game.cue("drop")
    game.animator.start(
        STICK_DROP,
        game.stick,
        Tween("angle", 0.0, 90.0, game.config.drop_duration, easing="ease_out_cubic"),
    )


def _evaluate(game: Game, ctx: TickContext) -> None:
    target = game.track.next
    result = evaluate_bridge(game.stick.pivot_x, game.stick.length, target)
    game.bridge = result
    signal = "bridge_succeeded" if result.success else "bridge_failed"
    game.bus.publish(
        signal,
        end_x=result.end_x,
        length=game.stick.length,
        target_x=target.x,
        target_right=target.right,
    )


def _walk(game: Game, ctx: TickContext) -> None:
    # Evaluating always precedes both walk stages and sets the bridge.
    result: BridgeResult = game.bridge  # type: ignore[assignment]
    target_x = walk_target(result, game.track.next, game.config)
    duration = walk_duration(game.hero.x, target_x, game.config)
    game.hero.pose = "walking"
    game.animator.start(HERO_WALK, game.hero, Tween("x", game.hero.x, target_x, duration))
    game.schedule.every(WALK_STEP, game.config.walk_step_interval)


def _pan_camera(game: Game, ctx: TickContext) -> None:
    target = camera_target(game.track.next, game.config)
    game.animator.start(
        CAMERA_PAN,
        game.camera,
        Tween(
            "offset_x", game.camera.offset_x, target,
            game.config.pan_duration, easing="ease_out_cubic",
        ),
    )


def _settle_success(game: Game, ctx: TickContext) -> None:
    score = game.scoreboard.award()
    game.track.advance()
    game.track.spawn_next()
    game.stick.reset(game.track.pivot_x)
    game.hero.pose = "cheering"
    game.schedule.after(SUCCESS_CUE, game.config.success_cue_duration)
    game.cue("success")
    game.message = MSG_SUCCESS
    game.bus.publish("round_won", score=score, index=game.track.current_index)


def _fall(game: Game, ctx: TickContext) -> None:
    game.message = MSG_FELL
    game.hero.pose = "falling"
    game.cue("failure")
    game.animator.start(
        HERO_FALL,
        game.hero,
        Tween("fall", 0.0, game.config.fall_depth, game.config.fall_duration, easing="ease_in"),
    )


def _game_over(game: Game, ctx: TickContext) -> None:
    game.message = MSG_GAME_OVER
    game.bus.publish("game_over", score=game.scoreboard.score)


def _finish_round(game: Game) -> None:
    """Runs whenever a round ends, whichever branch it took."""
    game.session = None
    game.bridge = None
    game.schedule.cancel(WALK_STEP)


_ON_ENTER: dict[Phase, Callable[[Game, TickContext], None]] = {
    Phase.GROWING: _begin_round,
    Phase.DROPPING: _drop_stick,
    Phase.EVALUATING: _evaluate,
    Phase.WALKING_SUCCESS: _walk,
    Phase.WALKING_FAIL: _walk,
    Phase.PANNING: _pan_camera,
    Phase.SETTLING: _settle_success,
    Phase.FALLING: _fall,
    Phase.GAME_OVER: _game_over,
}


def make_on_transition(game: Game) -> Callable[[TickContext, str, str], None]:
    """Return the FSM transition callback."""

    def on_transition(ctx: TickContext, old: str, new: str) -> None:
        before, after = Phase(old), Phase(new)
        if before.in_round and not after.in_round:
            _finish_round(game)
        action = _ON_ENTER.get(after)
        if action is not None:
            action(game, ctx)

    return on_transition
