"""Scrolling journal panel at the bottom of the screen."""
from __future__ import annotations

from collections import deque

import pygame

from stick_hero import Journal
from ui.constants import COLOR_LOG_BG, COLOR_TEXT_DIM, LOG_COLORS


class EventLogPanel:
    """Mirrors journal lines as a list of colored log messages."""

    def __init__(self, max_entries: int = 100) -> None:
        self.entries: deque[tuple[str, tuple[int, int, int]]] = deque(maxlen=max_entries)
        self._seen = 0

    def add(self, text: str, category: str = "default") -> None:
        color = LOG_COLORS.get(category, LOG_COLORS["default"])
        self.entries.append((text, color))

    def sync(self, journal: Journal) -> None:
        """Pull entries written since the last call."""
        if journal.count <= self._seen:
            return
        new = journal.entries_since(self._seen)
        self._seen += len(new)
        for entry in new:
            self.add(f"[{entry.at / 1000.0:7.3f}] {entry.text}", entry.event)

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        x: int, y: int, w: int, h: int,
    ) -> None:
        pygame.draw.rect(surface, COLOR_LOG_BG, (x, y, w, h))
        pygame.draw.line(surface, (50, 50, 60), (x, y), (x + w, y))

        line_h = 14
        max_lines = max(1, (h - 8) // line_h)
        entries = list(self.entries)[-max_lines:]
        if not entries:
            hint = font.render("journal is empty", True, COLOR_TEXT_DIM)
            surface.blit(hint, (x + 6, y + 4))
            return

        ty = y + 4
        for text, color in entries:
            rendered = font.render(text, True, color)
            surface.blit(rendered, (x + 6, ty))
            ty += line_h
