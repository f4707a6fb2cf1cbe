"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ui.constants import (
    LABEL_COLOR,
    LANE_COUNT,
    LANE_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)

if TYPE_CHECKING:
    from game.state import GalleryState


def draw_sidebar(surface: pygame.Surface, font: pygame.font.Font, state: GalleryState) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    h = LANE_H * LANE_COUNT

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("INFO", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    loop_label = "inf" if state.loop == 0 else str(state.loop)
    lines = [
        f"Family: {state.family}",
        f"Dur: {state.duration:.2f}s",
        f"Loop: {loop_label}",
        f"Pingpong: {'ON' if state.pingpong else 'OFF'}",
        f"Frame: {state.ticker.clock.frame_number}",
        f"Time: {state.ticker.clock.elapsed:.1f}s",
    ]
    for line in lines:
        surface.blit(font.render(line, True, TEXT_COLOR), (cx, cy))
        cy += line_h
    cy += 8

    if state.lanes:
        tween = state.lanes[0].tween
        flags = []
        if tween.paused:
            flags.append("PAUSED")
        if tween.reversed:
            flags.append("REVERSED")
        if tween.finished:
            flags.append("DONE")
        surface.blit(font.render(" ".join(flags) or "running", True, TEXT_DIM), (cx, cy))
        cy += line_h
        done = sum(lane.cycles_done for lane in state.lanes)
        surface.blit(font.render(f"Cycle cbs: {done}", True, TEXT_DIM), (cx, cy))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = LANE_H * LANE_COUNT
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = (
        "[</>] Family  [Space] Pause  [R] Reverse  [Bksp] Reset  "
        "[P] Pingpong  [L] Loop  [+/-] Duration  [Esc] Quit"
    )
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
