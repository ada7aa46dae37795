"""Window-size dependent placement of the canvas, reels and spin button."""
from __future__ import annotations

import pygame

from spin_reel import ReelSettings

from ui.constants import (
    ASPECT,
    BUTTON_FONT_DIVISOR,
    BUTTON_TOP_FRAC,
    MIN_W,
    REEL_H_FRAC,
    REEL_TOP_FRAC,
    REEL_W_FRAC,
)


def compute_canvas_size(width: int) -> tuple[int, int]:
    """Canvas fills the window width at a fixed aspect ratio."""
    width = max(MIN_W, width)
    return width, int(width * ASPECT)


def compute_button(width: int, height: int) -> tuple[int, pygame.Rect]:
    """Font size and rect of the spin button, centred near the top."""
    font_size = max(10, int(width / BUTTON_FONT_DIVISOR))
    pad_x, pad_y = font_size, font_size // 4
    w = font_size * 4 + 2 * pad_x
    h = font_size + 2 * pad_y
    rect = pygame.Rect(0, 0, w, h)
    rect.midtop = (width // 2, int(height * BUTTON_TOP_FRAC))
    return font_size, rect


def compute_reels(width: int, height: int, button_h: int) -> list[ReelSettings]:
    """Three equal reels side by side, the row centred horizontally."""
    w = width * REEL_W_FRAC
    h = height * REEL_H_FRAC
    x = w / 2
    y = height * REEL_TOP_FRAC + button_h / 2
    return [ReelSettings(x=x + i * w, y=y, w=w, h=h) for i in range(3)]
