"""In-memory pub/sub event bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

# Subscribing to this name receives every signal, after the named handlers.
WILDCARD = "*"


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        """Queue a signal for the next flush."""
        self._queue.append((signal_name, data))

    def emit(self, signal_name: str, **data: Any) -> None:
        """Deliver a signal right away, bypassing the queue."""
        self._dispatch(signal_name, data)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            self._dispatch(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()

    @property
    def pending(self) -> int:
        return len(self._queue)

    def _dispatch(self, signal_name: str, data: dict[str, Any]) -> None:
        for handler in list(self._subscribers.get(signal_name, ())):
            handler(signal_name, data)
        if signal_name != WILDCARD:
            for handler in list(self._subscribers.get(WILDCARD, ())):
                handler(signal_name, data)
