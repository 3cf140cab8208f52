"""Animator slots and the system that advances them."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Union

from pace_tween.components import Ramp, Tween
from pace_tween.easing import get_easing

if TYPE_CHECKING:
    from pace import TickContext

Animation = Union[Tween, Ramp]


class Animator:
    """Named animation slots, each driving one field of one target object."""

    def __init__(self) -> None:
        self._slots: dict[str, tuple[Any, Animation]] = {}

    def start(self, name: str, target: Any, anim: Animation) -> None:
        """Bind ``anim`` to ``target``. Replaces any slot with the same name."""
        if not hasattr(target, anim.field):
            raise AttributeError(
                f"{type(target).__name__} has no field {anim.field!r}"
            )
        self._slots[name] = (target, anim)

    def cancel(self, name: str) -> None:
        self._slots.pop(name, None)

    def has(self, name: str) -> bool:
        return name in self._slots

    def get(self, name: str) -> Animation | None:
        slot = self._slots.get(name)
        return slot[1] if slot is not None else None

    def names(self) -> list[str]:
        return list(self._slots)

    def clear(self) -> None:
        self._slots.clear()

    def items(self) -> list[tuple[str, Any, Animation]]:
        return [(name, target, anim) for name, (target, anim) in self._slots.items()]

    def owns(self, name: str, anim: Animation) -> bool:
        """True while ``anim`` is still the animation bound to ``name``."""
        slot = self._slots.get(name)
        return slot is not None and slot[1] is anim


def make_tween_system(
    animator: Animator,
    on_complete: Callable[[TickContext, str, Animation], None] | None = None,
) -> Callable[[TickContext], None]:
    def tween_system(ctx: TickContext) -> None:
        for name, target, anim in animator.items():
            # Slots cancelled or replaced by an earlier callback this tick.
            if not animator.owns(name, anim):
                continue
            if isinstance(anim, Tween):
                anim.elapsed += ctx.dt
                eased_t = get_easing(anim.easing)(anim.progress)
                value = anim.start_val + (anim.end_val - anim.start_val) * eased_t
                finished = anim.done
                if finished:
                    value = anim.end_val
            else:
                value = getattr(target, anim.field) + ctx.dt * anim.rate
                finished = value >= anim.limit
                if finished:
                    value = anim.limit

            setattr(target, anim.field, value)

            if finished:
                animator.cancel(name)
                if on_complete is not None:
                    on_complete(ctx, name, anim)

    return tween_system
