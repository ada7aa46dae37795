"""Bezier easing curves for frame-driven animation.

A curve is a sequence of 2D control points in (time, progress) space.
Evaluation reduces the points level by level, interpolating along each
segment at a fraction of its length, until a single point is left.
"""
from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping, Sequence, Union

Point = Sequence[float]
Curve = tuple[tuple[float, float], ...]
Timing = Union[str, Sequence[Point]]

LINEAR: Curve = ((0.0, 0.0), (1.0, 1.0))
EASE_IN: Curve = ((0.0, 0.0), (0.42, 0.0), (1.0, 1.0), (1.0, 1.0))
EASE_OUT: Curve = ((0.0, 0.0), (0.0, 0.0), (0.58, 1.0), (1.0, 1.0))
# Same control points as ease-out.
EASE_IN_OUT: Curve = ((0.0, 0.0), (0.0, 0.0), (0.58, 1.0), (1.0, 1.0))

PRESETS: Mapping[str, Curve] = MappingProxyType({
    "linear": LINEAR,
    "ease-in": EASE_IN,
    "ease-out": EASE_OUT,
    "ease-in-out": EASE_IN_OUT,
})


def pivot_points(timing: Timing = "linear") -> Sequence[Point]:
    """Resolve a preset name to its control points.

    A list or tuple of points is passed through unchanged. Unknown names
    fall back to ``linear``.
    """
    if isinstance(timing, (list, tuple)):
        return timing
    return PRESETS.get(timing, LINEAR)


def _segment_length(p1: Point, p2: Point) -> float:
    return math.sqrt((p1[0] - p2[0]) ** 2 + (p1[1] - p2[1]) ** 2)


def _point_on_segment(p1: Point, p2: Point, percent: float) -> tuple[float, float]:
    # Fraction of the segment's length; coincident points stay put.
    k = percent / 100 if _segment_length(p1, p2) else 0.0
    return (p1[0] + (p2[0] - p1[0]) * k, p1[1] + (p2[1] - p1[1]) * k)


def evaluate(points: Sequence[Point], t: float) -> Point | Sequence[Point]:
    """Reduce ``points`` to the single curve point at normalized time ``t``.

    With fewer than two points the input is returned unchanged.
    """
    if len(points) < 2:
        return points
    percent = t * 100
    while len(points) > 1:
        points = [
            _point_on_segment(points[i - 1], points[i], percent)
            for i in range(1, len(points))
        ]
    return points[0]


def progress(points: Sequence[Point], t: float) -> float:
    """Progress (second coordinate) of the curve at normalized time ``t``."""
    return evaluate(points, t)[1]


def sample(points: Sequence[Point], samples: int = 80) -> list[tuple[float, float]]:
    """Evenly spaced ``(t, progress)`` pairs, ``samples + 1`` of them."""
    return [(i / samples, progress(points, i / samples)) for i in range(samples + 1)]
