# planview/scroll_sync.py
"""Horizontal scroll lock-step between the chart regions.

Regions (time-axis header, bar content, scrollbar proxy) are injected handles
with a read/write `scroll_left`. The fixed label-panel header never scrolls
horizontally and is simply not registered.

State machine:
  IDLE --scroll event--> PROPAGATING --next frame: copy source to peers--> IDLE

Two guards keep programmatic assignments from echoing back:
  - events are dropped while a pass is pending;
  - each assignment is remembered per region, and the scroll event it causes
    is consumed without starting a new pass.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Mapping, Optional, Protocol, Tuple

from .frames import FrameRequester
from .geometry import scroll_target_px

REGION_HEADER = "header"
REGION_CONTENT = "content"
REGION_SCROLLBAR = "scrollbar"

# Browsers round scrollLeft to device pixels, so an echo can differ from the
# assigned value by less than a pixel. Kept equal to the page script.
ECHO_TOLERANCE_PX = 1.0


class ScrollRegion(Protocol):
    scroll_left: float


class SyncState(str, Enum):
    IDLE = "idle"
    PROPAGATING = "propagating"


def _attached(handle: object) -> bool:
    return handle is not None and bool(getattr(handle, "attached", True))


class ScrollSynchronizer:
    def __init__(
        self,
        frames: FrameRequester,
        regions: Optional[Mapping[str, ScrollRegion]] = None,
    ) -> None:
        self._frames = frames
        self._regions: Dict[str, ScrollRegion] = dict(regions or {})
        self._echo: Dict[str, float] = {}
        self._state = SyncState.IDLE
        self._source: Optional[str] = None
        self._frame: Optional[int] = None
        self.passes = 0

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def region_ids(self) -> Tuple[str, ...]:
        return tuple(self._regions)

    def attach(self, region_id: str, handle: ScrollRegion) -> None:
        self._regions[region_id] = handle
        self._echo.pop(region_id, None)

    def detach(self, region_id: str) -> None:
        self._regions.pop(region_id, None)
        self._echo.pop(region_id, None)

    def _live(self) -> Iterator[Tuple[str, ScrollRegion]]:
        for rid, handle in list(self._regions.items()):
            if _attached(handle):
                yield rid, handle

    def _get(self, region_id: Optional[str]) -> Optional[ScrollRegion]:
        if region_id is None:
            return None
        handle = self._regions.get(region_id)
        return handle if _attached(handle) else None

    def _assign(self, region_id: str, handle: ScrollRegion, value: float) -> None:
        if abs(handle.scroll_left - value) < ECHO_TOLERANCE_PX:
            return
        self._echo[region_id] = value
        handle.scroll_left = value

    def on_scroll(self, region_id: str, scroll_left: Optional[float] = None) -> bool:
        """Handle a scroll event from `region_id`; True when a sync pass was scheduled."""
        handle = self._get(region_id)
        if handle is None:
            return False

        current = handle.scroll_left if scroll_left is None else scroll_left
        if region_id in self._echo:
            expected = self._echo.pop(region_id)
            if abs(current - expected) < ECHO_TOLERANCE_PX:
                return False

        if self._state is SyncState.PROPAGATING:
            return False

        self._state = SyncState.PROPAGATING
        self._source = region_id
        self._frame = self._frames.request(self._run_pass)
        return True

    def _run_pass(self) -> None:
        self._frame = None
        try:
            source = self._get(self._source)
            if source is None:
                return
            value = source.scroll_left
            for rid, handle in self._live():
                if rid != self._source:
                    self._assign(rid, handle, value)
            self.passes += 1
        finally:
            self._state = SyncState.IDLE
            self._source = None

    def scroll_all_to(self, left: float) -> None:
        for rid, handle in self._live():
            self._assign(rid, handle, left)

    def scroll_to_fraction(self, fraction: float, reference: str = REGION_CONTENT) -> Optional[float]:
        """Scroll every region to `fraction` of the reference region's scrollable range."""
        ref = self._get(reference)
        if ref is None:
            return None
        scroll_width = getattr(ref, "scroll_width", None)
        client_width = getattr(ref, "client_width", None)
        if scroll_width is None or client_width is None:
            return None
        target = scroll_target_px(fraction, scroll_width, client_width)
        self.scroll_all_to(target)
        return target

    def close(self) -> None:
        if self._frame is not None:
            self._frames.cancel(self._frame)
            self._frame = None
        self._regions.clear()
        self._echo.clear()
        self._state = SyncState.IDLE
        self._source = None
