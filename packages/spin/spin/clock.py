"""Frame clocks: the host's "call me before the next repaint" primitive."""

import time
from typing import Callable

from spin.types import FrameCallback


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class FrameClock:
    def __init__(self, time_fn: Callable[[], float] | None = None) -> None:
        self._time_fn = time_fn if time_fn is not None else _monotonic_ms
        self._callbacks: list[FrameCallback] = []
        self._frame_number = 0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def now(self) -> float:
        """Current timestamp in milliseconds."""
        return self._time_fn()

    def request_frame(self, callback: FrameCallback) -> None:
        self._callbacks.append(callback)

    def pump(self) -> int:
        """Run every callback requested before this call with one timestamp.

        Callbacks requested while pumping wait for the next pump. If a callback
        raises, the ones after it stay queued ahead of any new requests.
        """
        snapshot = self._callbacks
        self._callbacks = []
        self._frame_number += 1
        timestamp = self.now()
        ran = 0
        try:
            for callback in snapshot:
                ran += 1
                callback(timestamp)
        finally:
            self._callbacks = snapshot[ran:] + self._callbacks
        return len(snapshot)


class ManualFrameClock(FrameClock):
    """Frame clock whose time only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        super().__init__(time_fn=lambda: self._now)
        self._now = start

    def advance(self, ms: float) -> int:
        if ms < 0:
            raise ValueError("cannot advance by a negative amount")
        self._now += ms
        return self.pump()
