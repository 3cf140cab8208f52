"""pace-fsm - Finite state machine primitives for the pace tick loop."""
from __future__ import annotations

from pace_fsm.components import FSM
from pace_fsm.guards import FSMGuards
from pace_fsm.systems import make_fsm_system

__all__ = ["FSM", "FSMGuards", "make_fsm_system"]
