"""Round journal: one timestamped line per major transition."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable

from pace_signal import WILDCARD, SignalBus

logger = logging.getLogger(__name__)


def _released(data: dict[str, Any]) -> str:
    if data.get("auto"):
        return f"Released at max length ({data['length']:.0f}px)"
    return f"Released at {data['length']:.0f}px"


_FORMATS: dict[str, Callable[[dict[str, Any]], str]] = {
    "round_started": lambda d: f"Round started on platform {d['index']}: waiting for release",
    "released": _released,
    "max_length": lambda d: "Max stick length reached -> auto-release",
    "dropped": lambda d: "Stick dropped",
    "bridge_succeeded": lambda d: f"Bridge success: tip at {d['end_x']:.0f}",
    "bridge_failed": lambda d: f"Bridge failed: tip at {d['end_x']:.0f}",
    "walk_finished": lambda d: "Walk finished",
    "camera_panned": lambda d: "Camera panned",
    "round_won": lambda d: f"Score {d['score']}",
    "game_over": lambda d: f"Game over with score {d['score']}",
    "restarted": lambda d: "Restarted",
}


@dataclass(frozen=True)
class JournalEntry:
    at: float
    event: str
    text: str
    data: dict[str, Any]


class Journal:
    """Subscribes to a SignalBus and keeps a readable record of each round.

    *clock_fn* returns the current game time in ms. Every entry is also
    written to the module logger at INFO level.
    """

    def __init__(self, bus: SignalBus, clock_fn: Callable[[], float]) -> None:
        self._entries: list[JournalEntry] = []
        self._clock_fn = clock_fn
        bus.subscribe(WILDCARD, self._on_signal)

    def _on_signal(self, signal: str, data: dict[str, Any]) -> None:
        fmt = _FORMATS.get(signal)
        if fmt is None:
            return
        entry = JournalEntry(at=self._clock_fn(), event=signal, text=fmt(data), data=dict(data))
        self._entries.append(entry)
        logger.info("[%.3f] %s", entry.at / 1000.0, entry.text)

    @property
    def entries(self) -> list[JournalEntry]:
        return list(self._entries)

    @property
    def count(self) -> int:
        return len(self._entries)

    def entries_since(self, index: int) -> list[JournalEntry]:
        """Entries recorded after the first ``index``. Spans restarts."""
        return self._entries[index:]

    def events(self) -> list[str]:
        return [e.event for e in self._entries]

    def lines(self) -> list[str]:
        return [f"[{e.at / 1000.0:.3f}] {e.text}" for e in self._entries]

    def write(self, path: str | Path) -> int:
        """Write all entries as JSONL. Returns number of lines written."""
        p = Path(path)
        with p.open("w") as f:
            for entry in self._entries:
                f.write(json.dumps(asdict(entry), default=str) + "\n")
        return len(self._entries)
