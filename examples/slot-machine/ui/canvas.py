"""Canvas-style drawing surface on top of a pygame Surface."""
from __future__ import annotations

import re

import pygame

from spin_reel.surface import STYLE_DEFAULTS

_FONT_RE = re.compile(r"(?P<bold>bold\s+)?(?P<size>\d+(?:\.\d+)?)px\s+(?P<family>.+)")
# Glow is faked by shrinking the glyphs, then scaling them back up.
_GLOW_MIN_SCALE = 0.1


def _color(name: str) -> pygame.Color | None:
    if name == "transparent":
        return None
    try:
        return pygame.Color(name)
    except ValueError:
        return None


class PygameCanvas:
    """Implements the reel's DrawingSurface protocol for a pygame Surface.

    Paths are lists of rectangles; ``clip`` narrows the target's clip rect.
    Text outlines are approximated by stamping the glyphs around a circle of
    ``line_width / 2``.
    """

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target
        self.stroke_style = "black"
        for name, value in STYLE_DEFAULTS.items():
            setattr(self, name, value)
        self._path: list[pygame.Rect] = []
        self._stack: list[tuple[dict, pygame.Rect | None, str]] = []
        self._fonts: dict[tuple[str, int, bool], pygame.font.Font] = {}

    def save(self) -> None:
        style = {name: getattr(self, name) for name in STYLE_DEFAULTS}
        self._stack.append((style, self.target.get_clip(), self.stroke_style))

    def restore(self) -> None:
        if not self._stack:
            return
        style, clip, stroke_style = self._stack.pop()
        for name, value in style.items():
            setattr(self, name, value)
        self.stroke_style = stroke_style
        self.target.set_clip(clip)

    def begin_path(self) -> None:
        self._path = []

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._path.append(pygame.Rect(round(x), round(y), round(w), round(h)))

    def stroke(self) -> None:
        color = _color(self.stroke_style)
        if color is None:
            return
        width = max(1, round(self.line_width))
        for r in self._path:
            pygame.draw.rect(self.target, color, r, width)

    def clip(self) -> None:
        if not self._path:
            return
        area = self._path[0].unionall(self._path[1:])
        current = self.target.get_clip()
        self.target.set_clip(area.clip(current))

    def stroke_text(self, text: str, x: float, y: float, max_width: float | None = None) -> None:
        glow = _color(self.shadow_color)
        if glow is not None and self.shadow_blur > 0:
            self._blit_glow(text, x, y, max_width, glow)

        color = _color(self.stroke_style)
        if color is None:
            return
        image = self._render(text, color, max_width)
        radius = max(1, round(self.line_width / 2))
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if dx * dx + dy * dy <= radius * radius:
                    self._blit_aligned(image, x + dx, y + dy)

    def fill_text(self, text: str, x: float, y: float, max_width: float | None = None) -> None:
        color = _color(self.fill_style)
        if color is None:
            return
        self._blit_aligned(self._render(text, color, max_width), x, y)

    def _font(self) -> pygame.font.Font:
        match = _FONT_RE.match(self.font)
        if match is None:
            family, size, bold = "monospace", 10, False
        else:
            family = match["family"].strip()
            size = max(1, round(float(match["size"])))
            bold = match["bold"] is not None
        key = (family, size, bold)
        font = self._fonts.get(key)
        if font is None:
            font = pygame.font.SysFont(family, size, bold=bold)
            self._fonts[key] = font
        return font

    def _render(self, text: str, color: pygame.Color, max_width: float | None) -> pygame.Surface:
        image = self._font().render(text, True, color)
        if max_width is not None and 0 < max_width < image.get_width():
            image = pygame.transform.smoothscale(
                image, (max(1, int(max_width)), image.get_height())
            )
        return image

    def _blit_glow(
        self, text: str, x: float, y: float, max_width: float | None, color: pygame.Color
    ) -> None:
        image = self._render(text, color, max_width)
        w, h = image.get_size()
        scale = max(_GLOW_MIN_SCALE, 1.0 / (1.0 + self.shadow_blur / 3))
        small = pygame.transform.smoothscale(
            image, (max(1, int(w * scale)), max(1, int(h * scale)))
        )
        blurred = pygame.transform.smoothscale(small, (w, h))
        self._blit_aligned(blurred, x, y)

    def _blit_aligned(self, image: pygame.Surface, x: float, y: float) -> None:
        r = image.get_rect()
        if self.text_align == "center":
            r.centerx = round(x)
        elif self.text_align in ("right", "end"):
            r.right = round(x)
        else:
            r.left = round(x)

        if self.text_baseline == "middle":
            r.centery = round(y)
        elif self.text_baseline in ("top", "hanging"):
            r.top = round(y)
        else:
            r.bottom = round(y)
        self.target.blit(image, r)
