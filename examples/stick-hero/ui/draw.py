"""Scene rendering from a game Frame."""
from __future__ import annotations

import math

import pygame

from stick_hero import Frame, Phase
from ui.constants import (
    GROUND_Y,
    HERO_COLORS,
    HERO_H,
    HERO_W,
    PLATFORM_COLOR,
    PLATFORM_EDGE,
    SCENE_H,
    SCENE_W,
    SKY_BOTTOM,
    SKY_TOP,
    STICK_COLOR,
    STICK_FAIL_COLOR,
    STICK_W,
    TEXT_COLOR,
    TEXT_LIGHT,
)


def draw_sky(surface: pygame.Surface) -> None:
    """Vertical gradient behind everything."""
    for y in range(0, SCENE_H, 4):
        t = y / SCENE_H
        color = tuple(int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
        pygame.draw.rect(surface, color, (0, y, SCENE_W, 4))


def stick_color(frame: Frame) -> tuple[int, int, int]:
    """The stick turns red once the hero is falling."""
    if frame.game_over or frame.phase is Phase.FALLING:
        return STICK_FAIL_COLOR
    return STICK_COLOR


def draw_world(surface: pygame.Surface, frame: Frame) -> None:
    """Platforms, stick and hero, shifted by the camera offset."""
    cam = frame.camera_offset

    for i, p in enumerate(frame.platforms):
        left = int(p.x + cam)
        if left > SCENE_W or left + p.width < 0:
            continue
        pygame.draw.rect(surface, PLATFORM_COLOR, (left, GROUND_Y, int(p.width), SCENE_H - GROUND_Y))
        if i == frame.current_index + 1:
            # center mark on the target
            mid = int(p.x + p.width / 2 + cam)
            pygame.draw.rect(surface, PLATFORM_EDGE, (mid - 4, GROUND_Y, 8, 4))

    stick = frame.stick
    if stick.length > 0.0:
        rad = math.radians(stick.angle)
        base = (stick.pivot_x + cam, GROUND_Y)
        tip = (base[0] + stick.length * math.sin(rad), GROUND_Y - stick.length * math.cos(rad))
        pygame.draw.line(surface, stick_color(frame), base, tip, STICK_W)

    hero = frame.hero
    hx = int(hero.x + cam)
    hy = int(GROUND_Y - HERO_H + hero.fall)
    color = HERO_COLORS.get(hero.pose, HERO_COLORS["standing"])
    pygame.draw.rect(surface, color, (hx, hy, HERO_W, HERO_H), border_radius=4)
    # headband
    pygame.draw.rect(surface, PLATFORM_EDGE, (hx, hy + 5, HERO_W, 3))
    if hero.pose == "cheering":
        pygame.draw.line(surface, color, (hx, hy + 10), (hx - 6, hy - 4), 3)
        pygame.draw.line(surface, color, (hx + HERO_W, hy + 10), (hx + HERO_W + 6, hy - 4), 3)


def draw_hud(surface: pygame.Surface, frame: Frame, font: pygame.font.Font, big_font: pygame.font.Font) -> None:
    """Score and the status message."""
    score = big_font.render(str(frame.score), True, TEXT_COLOR)
    surface.blit(score, score.get_rect(midtop=(SCENE_W // 2, 12)))

    msg = font.render(frame.message, True, TEXT_COLOR)
    surface.blit(msg, msg.get_rect(midtop=(SCENE_W // 2, 60)))

    if frame.game_over:
        overlay = pygame.Surface((SCENE_W, SCENE_H), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 110))
        surface.blit(overlay, (0, 0))
        title = big_font.render("GAME OVER", True, TEXT_LIGHT)
        surface.blit(title, title.get_rect(center=(SCENE_W // 2, SCENE_H // 2 - 20)))
        hint = font.render("Click or R to restart", True, TEXT_LIGHT)
        surface.blit(hint, hint.get_rect(center=(SCENE_W // 2, SCENE_H // 2 + 20)))
