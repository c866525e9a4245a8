# planview/resize.py
from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional, Protocol, Tuple

from .frames import FrameRequester

MIN_PANEL_WIDTH = 250
MAX_PANEL_WIDTH = 800
DEFAULT_PANEL_WIDTH = 400

RESIZE_CURSOR = "col-resize"

WidthListener = Callable[[float], None]


class Viewport(Protocol):
    """Document-level affordances touched while a resize drag is active."""

    attached: bool

    def set_cursor(self, cursor: Optional[str]) -> None: ...

    def set_user_select(self, enabled: bool) -> None: ...

    def capture_pointer(self, pointer_id: int) -> None: ...

    def release_pointer(self, pointer_id: int) -> None: ...


class ResizeState(str, Enum):
    IDLE = "idle"
    RESIZING = "resizing"


def clamp_panel_width(width: float) -> float:
    return max(float(MIN_PANEL_WIDTH), min(float(MAX_PANEL_WIDTH), float(width)))


def task_column_width(panel_width: float) -> float:
    return max(200.0, 0.6 * float(panel_width))


def responsible_column_width(panel_width: float) -> float:
    return max(120.0, 0.35 * float(panel_width))


class PanelResizer:
    """
    Drag-to-resize for the fixed label panel.

    pointer_down enters RESIZING, pointer_move queues a clamped width that is
    applied on the next frame (several moves in one frame collapse into one
    layout pass), pointer_up/pointer_cancel commit the pending width and return
    to IDLE. With a detached viewport down/move do nothing; up still returns
    to IDLE so the machine cannot get stuck.
    """

    def __init__(
        self,
        frames: FrameRequester,
        viewport: Optional[Viewport] = None,
        width: float = DEFAULT_PANEL_WIDTH,
        on_change: Optional[WidthListener] = None,
    ) -> None:
        self._frames = frames
        self._viewport = viewport
        self._width = clamp_panel_width(width)
        self._state = ResizeState.IDLE
        self._pointer_id: Optional[int] = None
        self._panel_left = 0.0
        self._pending: Optional[float] = None
        self._frame: Optional[int] = None
        self._listeners: List[WidthListener] = []
        if on_change is not None:
            self._listeners.append(on_change)
        self.layout_passes = 0

    @property
    def width(self) -> float:
        return self._width

    @property
    def state(self) -> ResizeState:
        return self._state

    def column_widths(self) -> Tuple[float, float]:
        return task_column_width(self._width), responsible_column_width(self._width)

    def add_listener(self, listener: WidthListener) -> None:
        self._listeners.append(listener)

    def _viewport_live(self) -> bool:
        vp = self._viewport
        return vp is not None and bool(getattr(vp, "attached", True))

    def _apply(self, width: float) -> None:
        width = clamp_panel_width(width)
        self.layout_passes += 1
        if width == self._width:
            return
        self._width = width
        for listener in list(self._listeners):
            listener(width)

    def _on_frame(self) -> None:
        self._frame = None
        pending, self._pending = self._pending, None
        if pending is not None:
            self._apply(pending)

    def set_width(self, width: float) -> None:
        self._apply(width)

    def pointer_down(self, pointer_id: int, panel_left: float) -> bool:
        if self._state is ResizeState.RESIZING:
            return False
        if self._viewport is not None and not self._viewport_live():
            return False

        self._state = ResizeState.RESIZING
        self._pointer_id = pointer_id
        self._panel_left = float(panel_left)
        if self._viewport_live():
            vp = self._viewport
            vp.capture_pointer(pointer_id)  # type: ignore[union-attr]
            vp.set_cursor(RESIZE_CURSOR)  # type: ignore[union-attr]
            vp.set_user_select(False)  # type: ignore[union-attr]
        return True

    def pointer_move(self, pointer_id: int, x: float) -> bool:
        if self._state is not ResizeState.RESIZING or pointer_id != self._pointer_id:
            return False
        if self._viewport is not None and not self._viewport_live():
            return False

        self._pending = clamp_panel_width(float(x) - self._panel_left)
        if self._frame is None:
            self._frame = self._frames.request(self._on_frame)
        return True

    def pointer_up(self, pointer_id: Optional[int] = None) -> bool:
        if self._state is not ResizeState.RESIZING:
            return False
        if pointer_id is not None and pointer_id != self._pointer_id:
            return False

        if self._frame is not None:
            self._frames.cancel(self._frame)
            self._frame = None
        pending, self._pending = self._pending, None
        if pending is not None:
            self._apply(pending)

        captured = self._pointer_id
        self._state = ResizeState.IDLE
        self._pointer_id = None
        if self._viewport_live() and captured is not None:
            vp = self._viewport
            vp.release_pointer(captured)  # type: ignore[union-attr]
            vp.set_cursor(None)  # type: ignore[union-attr]
            vp.set_user_select(True)  # type: ignore[union-attr]
        return True

    pointer_cancel = pointer_up
