"""Configuration records for reel widgets."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from spin_reel.surface import DrawingSurface


@dataclass(frozen=True)
class ReelStyle:
    """Immutable label styling.

    Attributes:
        color: Glow, outline-shadow and fill colour of the value labels.
        glow_blur: Shadow blur applied to the outline stroke.
        line_width: Outline stroke width.
        font_family: Font family; size always equals the reel height.
        baseline_nudge: Downward shift of the label, as a fraction of height.
    """

    color: str = "red"
    glow_blur: float = 15.0
    line_width: float = 5.0
    font_family: str = "monospace"
    baseline_nudge: float = 0.075


@dataclass(frozen=True)
class ReelSettings:
    """Partial update for a reel's placement. ``None`` fields are left alone."""

    x: float | None = None
    y: float | None = None
    w: float | None = None
    h: float | None = None
    surface: DrawingSurface | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> ReelSettings:
        """Build settings from a loose mapping, dropping unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in options.items() if k in known})

    def items(self) -> list[tuple[str, Any]]:
        """The fields that carry a value."""
        return [
            (f.name, getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]
