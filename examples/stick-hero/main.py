"""Stick Hero - hold to grow a stick, release to bridge the gap.

Exercises pace, pace-fsm, pace-tween, pace-schedule and pace-signal
through the stick_hero package.

Controls:
  Mouse / Space   Hold to grow, release to drop
  R / Click       Restart after game over
  Esc             Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from stick_hero import Game
from ui.audio import SAMPLE_RATE, SoundBoard
from ui.constants import FPS, LOG_H, SCENE_H, SCREEN_H, SCREEN_W
from ui.draw import draw_hud, draw_sky, draw_world
from ui.log_panel import EventLogPanel
from ui.scenery import Scenery

logger = logging.getLogger("stick_hero.main")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stick Hero - pace engine demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed for platforms (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--mute", action="store_true", help="Disable sound cues")
    p.add_argument("--journal", type=str, default=None,
                   metavar="FILE", help="Save the JSONL round journal to FILE on quit")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    game = Game(tps=args.fps, seed=args.seed)
    logger.info("seed %s", game.engine.seed)

    # Pygame init
    if not args.mute:
        pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Stick Hero - pace demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    small_font = pygame.font.SysFont("monospace", 11)
    big_font = pygame.font.SysFont("monospace", 32, bold=True)

    SoundBoard(game.bus, enabled=not args.mute)
    log_panel = EventLogPanel()
    scenery = Scenery(game.config.game_width, seed=args.seed)

    now = pygame.time.get_ticks()
    game.sync_clock(now)
    scenery.sync(now)
    running = True

    while running:
        clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE and not event.repeat:
                    game.hold_start()
                elif event.key == pygame.K_r:
                    game.restart()

            elif event.type == pygame.KEYUP and event.key == pygame.K_SPACE:
                game.hold_end()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if game.game_over:
                    game.restart()
                else:
                    game.hold_start()

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                game.hold_end()

        # --- Tick ---
        now = pygame.time.get_ticks()
        game.step(now)
        scenery.update(now)
        log_panel.sync(game.journal)

        # --- Render ---
        frame = game.snapshot()
        draw_sky(screen)
        scenery.draw(screen)
        draw_world(screen, frame)
        draw_hud(screen, frame, font, big_font)
        log_panel.draw(screen, small_font, 0, SCENE_H, SCREEN_W, LOG_H)

        pygame.display.flip()

    pygame.quit()

    if args.journal:
        n = game.journal.write(args.journal)
        logger.info("journal: %d entries written to %s", n, args.journal)

    sys.exit()


if __name__ == "__main__":
    main()
