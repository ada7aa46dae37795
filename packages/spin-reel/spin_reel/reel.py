"""Reel - a rotating drum that shows one value of a fixed sequence."""
from __future__ import annotations

from typing import Any, Hashable, Mapping, Sequence

from spin_reel.surface import DrawingSurface
from spin_reel.types import ReelSettings, ReelStyle


class Reel:
    """A slot-machine drum drawn as a clipped rectangle.

    The drum's angle is split evenly between its values. Rotation inside one
    value's arc becomes a vertical pixel offset, so the current value slides
    down while the next one enters from above.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        x: float,
        y: float,
        w: float,
        h: float,
        values: Sequence[Hashable],
        style: ReelStyle | None = None,
    ) -> None:
        if not values:
            raise ValueError("reel needs at least one value")
        self.surface = surface
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.style: ReelStyle = style if style is not None else ReelStyle()
        self.stopped = True

        self._values = tuple(values)
        self._index = 0
        self._degrees = 0.0
        self._offset_y = 0.0
        self._span = 360 / len(self._values)

    @property
    def values(self) -> tuple[Hashable, ...]:
        return self._values

    @property
    def index(self) -> int:
        return self._index

    @property
    def degrees(self) -> float:
        return self._degrees

    @property
    def offset_y(self) -> float:
        return self._offset_y

    @property
    def degrees_per_value(self) -> float:
        return self._span

    @property
    def current_value(self) -> Hashable:
        return self._values[self._index]

    @property
    def next_value(self) -> Hashable:
        return self._values[(self._index + 1) % len(self._values)]

    def setting(self, settings: ReelSettings | Mapping[str, Any]) -> Reel:
        """Move or resize the reel. Rotation state is kept."""
        if not isinstance(settings, ReelSettings):
            settings = ReelSettings.from_options(settings)
        for name, value in settings.items():
            setattr(self, name, value)
        return self

    def turn(self, units: float) -> Reel:
        """Set the rotation to ``units`` value steps from the origin.

        Fractional steps leave the drum between two values. Negative input
        is ignored.
        """
        if units < 0:
            return self

        count = len(self._values)
        position = units % count
        self._index = min(int(position), count - 1)
        self._degrees = position * self._span
        self._offset_y = self.h * (position - self._index)
        return self

    def draw(self) -> Reel:
        surface = self.surface
        surface.save()
        surface.begin_path()
        surface.rect(self.x, self.y, self.w, self.h)
        surface.stroke()
        surface.clip()
        self._draw_values()
        surface.restore()
        return self

    def _draw_values(self) -> None:
        x = self.x + self.w / 2
        y = self.y + self.h / 2 + self.h * self.style.baseline_nudge + self._offset_y
        self._show_text(self.current_value, x, y)
        self._show_text(self.next_value, x, y - self.h)

    def _show_text(self, value: Hashable, x: float, y: float) -> None:
        surface = self.surface
        style = self.style
        text = str(value)

        surface.text_align = "center"
        surface.text_baseline = "middle"
        surface.font = f"bold {self.h:g}px {style.font_family}"
        surface.shadow_color = style.color
        surface.shadow_blur = style.glow_blur
        surface.line_width = style.line_width
        surface.stroke_text(text, x, y, self.w)

        # Outline only while spinning.
        if self.stopped:
            surface.shadow_blur = 0
            surface.fill_style = style.color
            surface.fill_text(text, x, y, self.w)
