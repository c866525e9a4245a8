# planview/geometry.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional, Sequence

from .model import PlanTask, TaskBarGeometry, TimelineView, TimeUnit, Window
from .units import generate_time_units
from .util.tz import as_tzinfo, day_end_ms, day_start_ms
from .views import strategy_for


@dataclass(frozen=True)
class AxisBounds:
    start_ms: int   # first unit anchor at day start
    end_ms: int     # 23:59:59.999 on the last day of the last unit

    @property
    def total_ms(self) -> int:
        return self.end_ms - self.start_ms


def axis_bounds(
    units: Sequence[TimeUnit],
    view: "TimelineView | str | None",
    tz: "dt.tzinfo | str | None" = None,
) -> AxisBounds:
    if not units:
        raise ValueError("axis_bounds requires at least one time unit")
    tzinfo = as_tzinfo(tz)
    strat = strategy_for(view)
    last_day = strat.unit_end(units[-1].date)
    return AxisBounds(start_ms=day_start_ms(units[0].date, tzinfo), end_ms=day_end_ms(last_day, tzinfo))


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def geometry_on_axis(
    task: PlanTask,
    bounds: AxisBounds,
    view: "TimelineView | str | None",
    tz: "dt.tzinfo | str | None" = None,
) -> Optional[TaskBarGeometry]:
    if task.start_date is None or task.end_date is None:
        return None

    tzinfo = as_tzinfo(tz)
    total = bounds.total_ms
    if total <= 0:
        return None

    start_off = _clamp(day_start_ms(task.start_date, tzinfo) - bounds.start_ms, 0, total)
    end_off = _clamp(day_end_ms(task.end_date, tzinfo) - bounds.start_ms, 0, total)

    left = start_off / total * 100.0
    width = max(0.0, end_off - start_off) / total * 100.0
    width = max(width, strategy_for(view).min_width_percent)

    # Floored bars near the right edge slide left instead of overflowing.
    if left + width > 100.0:
        left = max(0.0, 100.0 - width)

    return TaskBarGeometry(left_percent=left, width_percent=width)


def task_bar_geometry(
    task: PlanTask,
    window: Window,
    view: "TimelineView | str | None",
    units: Optional[Sequence[TimeUnit]] = None,
    tz: "dt.tzinfo | str | None" = None,
) -> Optional[TaskBarGeometry]:
    """
    Bar position of `task` as percentages of the axis, or None without a full date range.

    Start is taken at day start and end at day end so single-day tasks keep a
    non-zero span. Ranges outside the axis are clamped to its edges and the
    width is floored at the view minimum (0.5 / 1 / 2 percent).
    """
    if not units:
        units = generate_time_units(window, view)
    return geometry_on_axis(task, axis_bounds(units, view, tz), view, tz)


def scroll_fraction_for_task(
    task: PlanTask,
    units: Sequence[TimeUnit],
    view: "TimelineView | str | None",
    tz: "dt.tzinfo | str | None" = None,
) -> Optional[float]:
    """Position of the task start along the axis in [0, 1]; None without a start date."""
    if task.start_date is None or not units:
        return None
    bounds = axis_bounds(units, view, tz)
    if bounds.total_ms <= 0:
        return None
    off = day_start_ms(task.start_date, as_tzinfo(tz)) - bounds.start_ms
    return _clamp(off / bounds.total_ms, 0.0, 1.0)


def scroll_target_px(fraction: float, scroll_width: float, client_width: float) -> float:
    max_scroll = max(0.0, float(scroll_width) - float(client_width))
    return _clamp(float(fraction), 0.0, 1.0) * max_scroll


def content_width_px(units: Sequence[TimeUnit], view: "TimelineView | str | None") -> int:
    return len(units) * strategy_for(view).unit_px
