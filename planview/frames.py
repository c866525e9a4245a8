# planview/frames.py
"""Animation-frame scheduling for the interactive state machines.

The browser binding uses requestAnimationFrame; in Python the host (or a
test) drives frames explicitly with FrameScheduler.flush().
"""

from __future__ import annotations

from typing import Callable, Dict, Protocol

FrameCallback = Callable[[], None]


class FrameRequester(Protocol):
    def request(self, callback: FrameCallback) -> int:
        """Queue `callback` for the next frame; return a handle for cancel()."""

    def cancel(self, handle: int) -> None:
        """Drop a queued callback; unknown handles are ignored."""


class FrameScheduler:
    def __init__(self) -> None:
        self._queue: Dict[int, FrameCallback] = {}
        self._next_handle = 1
        self.frames_run = 0

    def request(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._queue[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._queue.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Run one frame. Callbacks requested while it runs wait for the next frame."""
        batch = list(self._queue.items())
        self._queue.clear()
        for _handle, cb in batch:
            cb()
        self.frames_run += 1
        return len(batch)
