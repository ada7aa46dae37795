"""Scheduler - cooperative, frame-driven runner for eased animations."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Sequence

from spin.easing import Point, Timing, pivot_points, progress
from spin.types import FrameSource, ProgressCallback

log = logging.getLogger(__name__)


@dataclass
class AnimationTask:
    """One in-flight animation. Owned by its Scheduler until the last frame."""

    callback: ProgressCallback
    duration: float  # milliseconds
    points: Sequence[Point]
    start: float  # clock timestamp at scheduling

    def step(self, timestamp: float) -> bool:
        """Invoke the callback for this frame. Returns True while unfinished."""
        elapsed = min(max(timestamp - self.start, 0.0), self.duration)
        t = elapsed / self.duration if self.duration > 0 else 1.0
        self.callback(progress(self.points, t))
        return elapsed < self.duration


class Scheduler:
    """Drives a queue of animation tasks once per host frame.

    Tasks queued at the start of a frame each run exactly once in that
    frame, in FIFO order. When the queue empties the completion callbacks
    fire once, in registration order.
    """

    def __init__(self, clock: FrameSource) -> None:
        self._clock = clock
        self._tasks: list[AnimationTask] = []
        self._on_complete: list[Callable[[], None]] = []
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(
        self,
        callback: ProgressCallback,
        duration: float,
        timing: Timing = "linear",
    ) -> Scheduler | Literal[False]:
        """Queue an animation. Returns False if the task is malformed."""
        if not callable(callback):
            log.debug("rejected animation: callback %r is not callable", callback)
            return False
        if duration < 0:
            log.debug("rejected animation: negative duration %r", duration)
            return False
        points = pivot_points(timing)
        if len(points) < 2:
            log.debug("rejected animation: curve needs two points, got %r", points)
            return False
        self._tasks.append(
            AnimationTask(
                callback=callback,
                duration=duration,
                points=points,
                start=self._clock.now(),
            )
        )
        return self

    def on_completion(self, callback: Callable[[], None]) -> Scheduler | Literal[False]:
        if not callable(callback):
            log.debug("rejected completion callback %r", callback)
            return False
        self._on_complete.append(callback)
        return self

    def start(self) -> Scheduler:
        if self._running:
            return self
        self._running = True
        self._clock.request_frame(self._frame)
        return self

    def _frame(self, timestamp: float) -> None:
        batch = self._tasks
        self._tasks = []
        carried: list[AnimationTask] = []
        stepped = 0
        try:
            for task in batch:
                if task.step(timestamp):
                    carried.append(task)
                stepped += 1
        finally:
            # Tasks scheduled by callbacks this frame queue behind the carried
            # ones. A task whose callback raised stays queued.
            self._tasks = carried + batch[stepped:] + self._tasks
            if self._tasks:
                self._clock.request_frame(self._frame)

        if not self._tasks:
            self._finish()

    def _finish(self) -> None:
        self._running = False
        callbacks = self._on_complete
        self._on_complete = []
        log.debug("scheduler finished, %d completion callback(s)", len(callbacks))
        for callback in callbacks:
            callback()
