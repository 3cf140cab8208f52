"""FSMGuards registry."""
from __future__ import annotations

from typing import Any, Callable

Guard = Callable[[Any], bool]


class FSMGuards:
    """Named predicates over the FSM's subject object.

    Transition tables refer to guards by name, so a table can be written
    before any guard exists. Unknown names fail loudly at check time.
    """

    def __init__(self) -> None:
        self._guards: dict[str, Guard] = {}

    def register(self, name: str, fn: Guard) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def guard(self, name: str) -> Callable[[Guard], Guard]:
        """Decorator form of :meth:`register`."""

        def decorate(fn: Guard) -> Guard:
            self.register(name, fn)
            return fn

        return decorate

    def check(self, name: str, subject: Any) -> bool:
        try:
            fn = self._guards[name]
        except KeyError:
            raise KeyError(f"unknown guard {name!r}") from None
        return bool(fn(subject))

    def has(self, name: str) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return sorted(self._guards)

    def missing(self, transitions: dict[str, list[list[str]]]) -> list[str]:
        """Guard names used in ``transitions`` that are not registered."""
        used = {guard for edges in transitions.values() for guard, _ in edges}
        return sorted(used - self._guards.keys())
