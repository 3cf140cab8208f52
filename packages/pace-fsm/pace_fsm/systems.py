"""System factory for FSM evaluation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from pace_fsm.components import FSM
from pace_fsm.guards import FSMGuards

if TYPE_CHECKING:
    from pace import TickContext


def make_fsm_system(
    fsm: FSM,
    guards: FSMGuards,
    subject: Any,
    on_transition: Callable[[TickContext, str, str], None] | None = None,
) -> Callable[[TickContext], None]:
    """Return a system that evaluates one FSM's transitions each tick.

    When no transition fires for the current (leaf) state, the system walks
    up to parent states until a transition fires or the root is reached.
    At most one transition happens per tick.
    """

    def _parent(state: str) -> str | None:
        dot = state.rfind(".")
        return state[:dot] if dot >= 0 else None

    def _find_transition(state: str) -> str | None:
        current: str | None = state
        while current is not None:
            edges = fsm.transitions.get(current)
            if edges:
                for guard_name, target in edges:
                    if guards.check(guard_name, subject):
                        return target
            current = _parent(current)
        return None

    def _resolve_target(target: str) -> str:
        state = target
        seen: set[str] = set()
        while state not in seen and state in fsm.initial:
            seen.add(state)
            state = fsm.initial[state]
        return state

    def fsm_system(ctx: TickContext) -> None:
        target = _find_transition(fsm.state)
        if target is None:
            return
        old = fsm.state
        resolved = _resolve_target(target)
        fsm.state = resolved
        if on_transition is not None:
            on_transition(ctx, old, resolved)

    return fsm_system
