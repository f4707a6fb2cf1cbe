"""Layout constants and color definitions."""

from looptween import Family, Variant

FPS = 60

# Layout dimensions
LANE_COUNT = 3
LANE_H = 140
LABEL_W = 100
CURVE_W = 160
TRACK_W = 440
SIDEBAR_W = 180
STATUS_H = 36

SCREEN_W = LABEL_W + CURVE_W + TRACK_W + SIDEBAR_W
SCREEN_H = LANE_H * LANE_COUNT + STATUS_H

# Orb
ORB_RADIUS = 10
TRACK_PAD = 40  # room for Back/Elastic overshoot

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_BG = (25, 25, 40)
TRACK_RAIL = (60, 60, 80)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
PAUSED_COLOR = (128, 128, 128)
FINISHED_COLOR = (255, 255, 255)

VARIANT_COLORS: dict[Variant, tuple[int, int, int]] = {
    Variant.IN: (255, 160, 40),
    Variant.OUT: (60, 220, 80),
    Variant.IN_OUT: (220, 80, 220),
}

FAMILIES = list(Family)

# Loop presets cycled with [L]; 0 loops forever
LOOP_PRESETS = [0, 1, 3]
