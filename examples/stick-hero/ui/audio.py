"""Synthesized sound cues played in response to the game's ``cue`` signal."""
from __future__ import annotations

import logging
import math
from array import array

import pygame

from pace_signal import SignalBus
from ui.constants import TONE_GAIN, TONES

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050


def _wave(waveform: str, phase: float) -> float:
    """One sample in [-1, 1] at ``phase`` cycles."""
    frac = phase % 1.0
    if waveform == "square":
        return 1.0 if frac < 0.5 else -1.0
    if waveform == "sawtooth":
        return 2.0 * frac - 1.0
    if waveform == "triangle":
        return 4.0 * frac - 1.0 if frac < 0.5 else 3.0 - 4.0 * frac
    return math.sin(2.0 * math.pi * frac)


def tone_samples(
    segments: list[tuple[float, float, str, float]],
    sample_rate: int = SAMPLE_RATE,
    channels: int = 1,
) -> array:
    """Mix tone segments into signed 16-bit PCM.

    Each segment decays exponentially from the first to the second
    TONE_GAIN value over its own duration.
    """
    total = max(offset + duration for _, duration, _, offset in segments)
    frames = int(total * sample_rate)
    mix = [0.0] * frames
    g0, g1 = TONE_GAIN
    for freq, duration, waveform, offset in segments:
        start = int(offset * sample_rate)
        length = int(duration * sample_rate)
        for i in range(length):
            t = i / sample_rate
            gain = g0 * (g1 / g0) ** (t / duration)
            mix[start + i] += gain * _wave(waveform, freq * t)

    buf = array("h")
    for s in mix:
        sample = int(max(-1.0, min(1.0, s)) * 32767)
        buf.extend([sample] * channels)
    return buf


class SoundBoard:
    """Plays one tone per cue name. Runs silently if audio is unavailable."""

    def __init__(self, bus: SignalBus, enabled: bool = True) -> None:
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        self.enabled = enabled
        if enabled:
            self._load()
        bus.subscribe("cue", self._on_cue)

    def _load(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(SAMPLE_RATE, -16, 1, 512)
            sample_rate, _, channels = pygame.mixer.get_init()
            for name, segments in TONES.items():
                pcm = tone_samples(segments, sample_rate, channels)
                self.sounds[name] = pygame.mixer.Sound(buffer=pcm.tobytes())
        except pygame.error as e:
            logger.warning("audio disabled: %s", e)
            self.sounds.clear()
            self.enabled = False
            return
        logger.debug("audio ready: %s", sorted(self.sounds))

    def _on_cue(self, signal: str, data: dict) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(data.get("name", ""))
        if sound is not None:
            sound.play()
