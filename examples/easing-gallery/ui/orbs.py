"""Orb circle renderer."""
from __future__ import annotations

import pygame

from looptween import Tween, Variant

from ui.constants import FINISHED_COLOR, PAUSED_COLOR, VARIANT_COLORS


def draw_orb(
    surface: pygame.Surface,
    x: int,
    y: int,
    radius: int,
    tween: Tween,
    variant: Variant,
) -> None:
    """Draw a single orb colored by tween state and easing variant."""
    if tween.paused:
        fill = PAUSED_COLOR
    elif tween.finished:
        fill = FINISHED_COLOR
    else:
        fill = VARIANT_COLORS.get(variant, (200, 200, 200))

    pygame.draw.circle(surface, fill, (x, y), radius)
    # Thin outline
    outline = tuple(min(c + 40, 255) for c in fill)
    pygame.draw.circle(surface, outline, (x, y), radius, 1)
