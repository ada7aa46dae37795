"""Layout, colour and timing constants."""
from __future__ import annotations

FPS = 60

# Window defaults (overridden by CLI --width); height follows ASPECT.
DEFAULT_W = 800
MIN_W = 320
ASPECT = 3 / 4

# Reel placement as fractions of the canvas
REEL_W_FRAC = 0.25
REEL_H_FRAC = 0.35
REEL_TOP_FRAC = 0.2

# Spin button
BUTTON_FONT_DIVISOR = 25
BUTTON_TOP_FRAC = 0.04

# Colors
BG_COLOR = (236, 232, 220)
REEL_BORDER = (40, 40, 40)
TEXT_COLOR = (30, 30, 30)
TEXT_DIM = (120, 120, 120)
BUTTON_BG = (200, 40, 40)
BUTTON_BG_DISABLED = (160, 150, 150)
BUTTON_TEXT = (255, 255, 255)
WIN_COLOR = (30, 140, 50)
