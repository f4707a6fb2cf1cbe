"""Lane rendering: one row per easing variant of the selected family."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ui.constants import (
    CURVE_W,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    ORB_RADIUS,
    TEXT_DIM,
    TRACK_BG,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
    VARIANT_COLORS,
)
from ui.curves import draw_curve_plot
from ui.orbs import draw_orb

if TYPE_CHECKING:
    from game.state import GalleryState


def draw_lanes(surface: pygame.Surface, state: GalleryState, font: pygame.font.Font) -> None:
    """Draw each lane's label, curve plot and orb track."""
    track_x = LABEL_W + CURVE_W
    full_w = LABEL_W + CURVE_W + TRACK_W

    for i, lane in enumerate(state.lanes):
        lane_y = i * LANE_H
        tween = lane.tween

        # Lane background
        pygame.draw.rect(surface, LANE_BG, (0, lane_y, full_w, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (full_w, lane_y + LANE_H - 1))

        # Labels
        label = font.render(f"{state.family}", True, LABEL_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height()))
        sub = font.render(f"{lane.variant}", True, VARIANT_COLORS[lane.variant])
        surface.blit(sub, (10, lane_y + LANE_H // 2))
        cycles = font.render(f"cycle {tween.cycle_index}", True, TEXT_DIM)
        surface.blit(cycles, (10, lane_y + LANE_H // 2 + sub.get_height() + 4))

        # Curve plot, tracking the phase the tween fed to the curve
        phase = tween.progression
        if tween.pingpong and tween.cycle_index % 2 != 0:
            phase = 1.0 - phase
        draw_curve_plot(
            surface, state.family, lane.variant, LABEL_W, lane_y + 10, CURVE_W, LANE_H - 20, phase
        )

        # Track
        pygame.draw.rect(surface, TRACK_BG, (track_x, lane_y, TRACK_W, LANE_H))
        rail_y = lane_y + LANE_H // 2
        rail_left = track_x + TRACK_PAD
        rail_right = track_x + TRACK_W - TRACK_PAD
        pygame.draw.line(surface, TRACK_RAIL, (rail_left, rail_y), (rail_right, rail_y), 2)

        color = VARIANT_COLORS[lane.variant]
        dim_color = tuple(c // 3 for c in color)
        pygame.draw.circle(surface, dim_color, (rail_left, rail_y), 4)
        pygame.draw.circle(surface, dim_color, (rail_right, rail_y), 4)

        # Interpolation is the caller's job: map the eased value onto the rail
        ox = int(rail_left + (rail_right - rail_left) * lane.value)
        draw_orb(surface, ox, rail_y, ORB_RADIUS, tween, lane.variant)
