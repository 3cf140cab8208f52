"""Platform generation and the append-only platform track."""
from __future__ import annotations

import random
from typing import Iterator

from stick_hero.config import GameConfig
from stick_hero.types import Platform, TrackError


class PlatformGenerator:
    """Draws platform geometry from the configured inclusive integer ranges."""

    def __init__(self, rng: random.Random, config: GameConfig) -> None:
        self._rng = rng
        self._config = config

    def first(self) -> Platform:
        width = self._rng.randint(*self._config.first_width_range)
        return Platform(x=self._config.start_x, width=width)

    def after(self, last: Platform) -> Platform:
        gap = self._rng.randint(*self._config.gap_range)
        width = self._rng.randint(*self._config.width_range)
        return Platform(x=last.right + gap, width=width)


class PlatformTrack:
    """Platforms in crossing order plus the index the hero stands on.

    Platforms are only ever appended. Whenever a round can start, the
    platform after ``current_index`` exists.
    """

    def __init__(self, generator: PlatformGenerator) -> None:
        self._generator = generator
        self._platforms: list[Platform] = []
        self._current_index = 0

    def spawn_initial(self) -> None:
        self._platforms.clear()
        first = self._generator.first()
        self._platforms.append(first)
        self._platforms.append(self._generator.after(first))
        self._current_index = 0

    def spawn_next(self) -> Platform:
        if not self._platforms:
            raise TrackError(0, 0)
        platform = self._generator.after(self._platforms[-1])
        self._platforms.append(platform)
        return platform

    def advance(self) -> int:
        """Move the hero onto the next platform."""
        if self._current_index + 1 >= len(self._platforms):
            raise TrackError(self._current_index + 1, len(self._platforms))
        self._current_index += 1
        return self._current_index

    def __len__(self) -> int:
        return len(self._platforms)

    def __iter__(self) -> Iterator[Platform]:
        return iter(self._platforms)

    def __getitem__(self, index: int) -> Platform:
        if not 0 <= index < len(self._platforms):
            raise TrackError(index, len(self._platforms))
        return self._platforms[index]

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current(self) -> Platform:
        return self[self._current_index]

    @property
    def next(self) -> Platform:
        return self[self._current_index + 1]

    @property
    def pivot_x(self) -> float:
        """Right edge of the current platform, where the stick stands."""
        return self.current.right

    def platforms(self) -> tuple[Platform, ...]:
        return tuple(self._platforms)
