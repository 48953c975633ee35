"""Layout constants and color definitions."""

FPS = 60

# Layout dimensions
LANE_H = 100
LABEL_W = 110
TRACK_W = 520
SIDEBAR_W = 190
STATUS_H = 36
TRACK_PAD = 30

SCREEN_W = LABEL_W + TRACK_W + SIDEBAR_W

# Orb
ORB_RADIUS = 11

# Threshold steps for [+/-], in pixels
THRESHOLDS = [0.05, 0.5, 2.0, 8.0]

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
TRACK_RAIL = (60, 60, 80)
TARGET_COLOR = (255, 255, 255)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
SETTLED_COLOR = (100, 255, 100)

# Preset name → color
PRESET_COLORS: dict[str, tuple[int, int, int]] = {
    "no_wobble": (0, 220, 220),
    "gentle": (60, 220, 80),
    "wobbly": (220, 80, 220),
    "stiff": (255, 160, 40),
}


def screen_h(lane_count: int) -> int:
    return LANE_H * lane_count + STATUS_H
