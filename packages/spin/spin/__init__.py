"""spin - Frame-driven easing animation in Python."""

from spin.clock import FrameClock, ManualFrameClock
from spin.easing import PRESETS, evaluate, pivot_points, progress, sample
from spin.scheduler import AnimationTask, Scheduler
from spin.types import FrameCallback, FrameSource, ProgressCallback

__all__ = [
    "Scheduler",
    "AnimationTask",
    "FrameClock",
    "ManualFrameClock",
    "FrameSource",
    "FrameCallback",
    "ProgressCallback",
    "PRESETS",
    "pivot_points",
    "evaluate",
    "progress",
    "sample",
]
