"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 640
SCREEN_H = 220
BAR_X = 40
BAR_Y = 70
BAR_W = SCREEN_W - 2 * BAR_X
STATUS_H = 36

# Colors
BG_COLOR = (20, 20, 30)
TRACK_BG = (35, 35, 50)
TRACK_BORDER = (60, 60, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)

# Named bar backgrounds -> RGB
BAR_COLORS: dict[str, tuple[int, int, int]] = {
    "blue": (60, 110, 230),
    "green": (60, 200, 90),
}

# Phase name -> label color
PHASE_COLORS: dict[str, tuple[int, int, int]] = {
    "ramp": (0, 220, 220),
    "accelerate": (255, 160, 40),
    "settle": (220, 80, 220),
}
