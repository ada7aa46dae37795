"""Drawing surface boundary and a headless recording implementation."""
from __future__ import annotations

from typing import Any, Protocol


class DrawingSurface(Protocol):
    """Immediate-mode 2D context the reel paints onto.

    Mirrors the subset of an HTML canvas context the widget needs: a
    save/restore state stack, rectangular paths with stroke and clip, text
    style attributes and outlined/filled text.
    """

    text_align: str
    text_baseline: str
    font: str
    shadow_color: str
    shadow_blur: float
    line_width: float
    fill_style: str

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def begin_path(self) -> None: ...

    def rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def stroke(self) -> None: ...

    def clip(self) -> None: ...

    def stroke_text(self, text: str, x: float, y: float, max_width: float | None = None) -> None: ...

    def fill_text(self, text: str, x: float, y: float, max_width: float | None = None) -> None: ...


STYLE_DEFAULTS: dict[str, Any] = {
    "text_align": "start",
    "text_baseline": "alphabetic",
    "font": "10px sans-serif",
    "shadow_color": "transparent",
    "shadow_blur": 0.0,
    "line_width": 1.0,
    "fill_style": "black",
}


class RecordingSurface:
    """Surface that records every call instead of drawing.

    ``calls`` holds ``(name, args)`` tuples in call order. Text calls append
    a copy of the style in effect as their last argument.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._stack: list[dict[str, Any]] = []
        for name, value in STYLE_DEFAULTS.items():
            setattr(self, name, value)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def style(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in STYLE_DEFAULTS}

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def texts(self) -> list[tuple[str, tuple[Any, ...]]]:
        return [(name, args) for name, args in self.calls if name.endswith("_text")]

    def clear(self) -> None:
        self.calls.clear()

    def save(self) -> None:
        self._stack.append(self.style())
        self.calls.append(("save", ()))

    def restore(self) -> None:
        if self._stack:
            for name, value in self._stack.pop().items():
                setattr(self, name, value)
        self.calls.append(("restore", ()))

    def begin_path(self) -> None:
        self.calls.append(("begin_path", ()))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("rect", (x, y, w, h)))

    def stroke(self) -> None:
        self.calls.append(("stroke", ()))

    def clip(self) -> None:
        self.calls.append(("clip", ()))

    def stroke_text(self, text: str, x: float, y: float, max_width: float | None = None) -> None:
        self.calls.append(("stroke_text", (text, x, y, max_width, self.style())))

    def fill_text(self, text: str, x: float, y: float, max_width: float | None = None) -> None:
        self.calls.append(("fill_text", (text, x, y, max_width, self.style())))
