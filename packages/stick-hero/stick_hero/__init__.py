"""stick-hero - Round state machine and timing pipeline for a stick-bridge reflex game."""
from __future__ import annotations

from stick_hero.bridge import BridgeResult, evaluate_bridge
from stick_hero.config import GameConfig
from stick_hero.game import Game
from stick_hero.journal import Journal, JournalEntry
from stick_hero.snapshot import Frame, HeroView, StickView
from stick_hero.track import PlatformGenerator, PlatformTrack
from stick_hero.types import Phase, Platform, TrackError

__all__ = [
    "Game",
    "GameConfig",
    "Phase",
    "Platform",
    "PlatformGenerator",
    "PlatformTrack",
    "TrackError",
    "BridgeResult",
    "evaluate_bridge",
    "Journal",
    "JournalEntry",
    "Frame",
    "HeroView",
    "StickView",
]
