"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from looptween import Family, Variant, lookup

from ui.constants import CURVE_BG, TEXT_DIM, VARIANT_COLORS


def draw_curve_plot(
    surface: pygame.Surface,
    family: Family,
    variant: Variant,
    x: int,
    y: int,
    w: int,
    h: int,
    current_phase: float,
) -> None:
    """Draw an easing curve with a tracking dot at the tween's current phase."""
    pad = 10
    plot_x = x + pad
    plot_y = y + pad + h // 8
    plot_w = w - 2 * pad
    # Leave headroom above and below for overshooting curves
    plot_h = h - 2 * pad - h // 4

    # Background
    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))

    # Axes
    pygame.draw.line(
        surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x + plot_w, plot_y + plot_h)
    )
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x, plot_y))

    curve = lookup(family, variant)
    color = VARIANT_COLORS.get(variant, (200, 200, 200))
    samples = 120
    points = []
    for i in range(samples + 1):
        k = i / samples
        v = curve(k)
        px = plot_x + k * plot_w
        py = plot_y + plot_h - v * plot_h
        points.append((px, py))

    pygame.draw.lines(surface, color, False, points, 2)

    # Moving dot
    v = curve(current_phase)
    dot_x = int(plot_x + current_phase * plot_w)
    dot_y = int(plot_y + plot_h - v * plot_h)
    pygame.draw.circle(surface, (255, 255, 255), (dot_x, dot_y), 4)
    pygame.draw.circle(surface, color, (dot_x, dot_y), 3)
