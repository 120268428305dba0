"""Layout constants and color definitions."""

FPS = 60

# Layout dimensions
SIDEBAR_W = 200
STATUS_H = 36
PLOT_W = 800
PLOT_H = 560

SCREEN_W = PLOT_W + SIDEBAR_W
SCREEN_H = PLOT_H + STATUS_H

# World units -> pixels
PX_PER_UNIT = 60
ORIGIN = (PLOT_W // 2, PLOT_H // 2)

MARKER_RADIUS = 6
NODE_RADIUS = 9

# Colors
BG_COLOR = (20, 20, 30)
GRID_COLOR = (35, 35, 50)
AXIS_COLOR = (90, 90, 110)
NODE_COLOR = (255, 255, 255)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)

# Phase → color
PHASE_COLORS: dict[str, tuple[int, int, int]] = {
    "running": (60, 220, 80),
    "resetting": (255, 160, 40),
}

# Function type → trail color
FUNCTION_COLORS: dict[str, tuple[int, int, int]] = {
    "horizontal_line": (200, 200, 200),
    "sloped_line": (0, 220, 220),
    "squared": (255, 160, 40),
    "cubed": (220, 80, 220),
    "square_root": (60, 220, 80),
    "sine": (80, 140, 255),
    "cosine": (255, 90, 90),
}
