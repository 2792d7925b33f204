"""Cooperative frame/timer scheduler pumped by the render loop.

Plays the role a browser gives requestAnimationFrame and setTimeout:
everything runs on the caller's thread from tick(), nothing blocks.
"""

import itertools
import time
from typing import Callable


class FrameScheduler:
    """One-shot frame callbacks and delayed callbacks with cancel handles."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._handles = itertools.count(1)
        self._frames: dict[int, Callable[[float], None]] = {}
        self._timers: dict[int, tuple[float, Callable[[], None]]] = {}

    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    def request_frame(self, callback: Callable[[float], None]) -> int:
        """Run callback(timestamp) once on the next tick."""
        handle = next(self._handles)
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle: int):
        self._frames.pop(handle, None)

    def after(self, delay: float, callback: Callable[[], None]) -> int:
        """Run callback() once on the first tick at least delay seconds from now."""
        handle = next(self._handles)
        self._timers[handle] = (self._clock() + delay, callback)
        return handle

    def cancel_after(self, handle: int):
        self._timers.pop(handle, None)

    def tick(self, now: float | None = None):
        """Fire due timers, then the frame callbacks requested before this tick."""
        if now is None:
            now = self._clock()

        due = sorted(
            (deadline, handle)
            for handle, (deadline, _) in self._timers.items()
            if deadline <= now
        )
        for _, handle in due:
            # A timer callback may have cancelled a later one
            entry = self._timers.pop(handle, None)
            if entry is not None:
                entry[1]()

        # Callbacks requested while this batch runs wait for the next tick
        batch = list(self._frames)
        for handle in batch:
            callback = self._frames.pop(handle, None)
            if callback is not None:
                callback(now)
