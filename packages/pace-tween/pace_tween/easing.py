"""Easing curves. Each maps progress in [0, 1] to eased progress in [0, 1]."""
from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    """Quadratic: starts slow, used for falling."""
    return t * t


def ease_out(t: float) -> float:
    return 1 - (1 - t) ** 2


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_out_cubic(t: float) -> float:
    """Fast start, gentle landing. Used for the stick drop and camera pan."""
    return 1 - (1 - t) ** 3


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_out_cubic": ease_out_cubic,
}


def get_easing(name: str) -> Easing:
    """Look up an easing by name. Raises KeyError for unknown names."""
    try:
        return EASINGS[name]
    except KeyError:
        raise KeyError(f"unknown easing {name!r}; known: {', '.join(EASINGS)}") from None
