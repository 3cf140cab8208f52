"""FSM state holder."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FSM:
    """Finite state machine. Transition table maps states to guard/target pairs.

    Supports hierarchical states via dot-notation (e.g. ``"round.growing"``).
    Parent-state transitions act as fallbacks for child states.

    ``initial`` maps parent states to their default child on entry.
    """

    state: str
    transitions: dict[str, list[list[str]]]
    initial: dict[str, str] = field(default_factory=dict)

    def within(self, prefix: str) -> bool:
        """True if the current state is ``prefix`` or one of its descendants."""
        return self.state == prefix or self.state.startswith(prefix + ".")
