"""pace-tween - Time-based value interpolation for the pace tick loop."""
from __future__ import annotations

from pace_tween.components import Ramp, Tween
from pace_tween.easing import EASINGS, get_easing
from pace_tween.systems import Animator, make_tween_system

__all__ = ["Tween", "Ramp", "EASINGS", "get_easing", "Animator", "make_tween_system"]
