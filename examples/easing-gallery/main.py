"""Easing Gallery — looping tween visualizer.

Every variant of the selected easing family gets a lane with its own Tween,
all driven by one Ticker fed with pygame's frame delta.

Controls:
  Left/Right  Previous / next easing family
  Space       Pause / resume
  R           Reverse direction
  Backspace   Reset
  P           Toggle ping-pong
  L           Cycle loop count (infinite, 1, 3)
  +/-         Adjust cycle duration
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from game.state import GalleryState
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.lanes import draw_lanes
from ui.status import draw_sidebar, draw_status_bar


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Easing Gallery — looptween visual demo")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery — looptween demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState(tps=args.fps)
    running = True

    while running:
        dt = clock.tick(args.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_RIGHT:
                    state.next_family(1)
                elif event.key == pygame.K_LEFT:
                    state.next_family(-1)
                elif event.key == pygame.K_SPACE:
                    state.pause_resume()
                elif event.key == pygame.K_r:
                    state.reverse()
                elif event.key == pygame.K_BACKSPACE:
                    state.reset()
                elif event.key == pygame.K_p:
                    state.toggle_pingpong()
                elif event.key == pygame.K_l:
                    state.next_loop()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.change_duration(0.25)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.change_duration(-0.25)

        # --- Frame ---
        state.ticker.step(dt)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, state, font)
        draw_sidebar(screen, font, state)
        draw_status_bar(screen, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
