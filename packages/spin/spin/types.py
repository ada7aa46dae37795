"""Shared type aliases and protocols for spin."""

from __future__ import annotations

from typing import Callable, Protocol

# Invoked once per frame with a millisecond timestamp.
FrameCallback = Callable[[float], None]

# Invoked with eased progress in [0, 1].
ProgressCallback = Callable[[float], None]


class FrameSource(Protocol):
    """Host timing boundary consumed by Scheduler."""

    def now(self) -> float: ...

    def request_frame(self, callback: FrameCallback) -> None: ...
