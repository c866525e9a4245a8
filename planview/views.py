# planview/views.py
"""Per-view policy table.

All daily/weekly/monthly branching goes through VIEW_STRATEGIES so the window
inferencer, unit generator and position mapper never switch on the view
themselves.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .model import TimelineView
from .util.dates import (
    add_days,
    add_months,
    end_of_month,
    fmt_month_day,
    fmt_month_year,
    start_of_month,
    start_of_week,
)

DateFn = Callable[[dt.date], dt.date]
WindowFn = Callable[[dt.date, dt.date], Tuple[dt.date, dt.date]]


@dataclass(frozen=True)
class ViewStrategy:
    view: TimelineView
    align: DateFn          # anchor of the unit containing a date
    step: DateFn           # next unit anchor
    unit_end: DateFn       # last day covered by the unit anchored at a date
    pad: WindowFn          # (min_date, max_date) -> padded window
    default_start: DateFn  # today -> default window start
    default_end: DateFn    # today -> default window end
    label: Callable[[dt.date, dt.date], str]
    min_width_percent: float
    unit_px: int


def _week_label(anchor: dt.date, last: dt.date) -> str:
    start_label = fmt_month_day(anchor)
    end_label = str(last.day) if last.month == anchor.month else fmt_month_day(last)
    return f"{start_label} – {end_label}"


# Padding constants: daily +-7 days, weekly +-14 days, monthly +-1 whole month.
DAILY = ViewStrategy(
    view=TimelineView.DAILY,
    align=lambda d: d,
    step=lambda d: add_days(d, 1),
    unit_end=lambda d: d,
    pad=lambda lo, hi: (add_days(lo, -7), add_days(hi, 7)),
    default_start=lambda today: add_days(today, -7),
    default_end=lambda today: add_days(today, 30),
    label=lambda anchor, _last: fmt_month_day(anchor),
    min_width_percent=0.5,
    unit_px=70,
)

WEEKLY = ViewStrategy(
    view=TimelineView.WEEKLY,
    align=start_of_week,
    step=lambda d: add_days(d, 7),
    unit_end=lambda d: add_days(d, 6),
    pad=lambda lo, hi: (add_days(lo, -14), add_days(hi, 14)),
    default_start=lambda today: add_days(today, -14),
    default_end=lambda today: add_days(today, 60),
    label=_week_label,
    min_width_percent=1.0,
    unit_px=100,
)

MONTHLY = ViewStrategy(
    view=TimelineView.MONTHLY,
    align=start_of_month,
    step=lambda d: add_months(start_of_month(d), 1),
    unit_end=end_of_month,
    pad=lambda lo, hi: (start_of_month(add_months(lo, -1)), end_of_month(add_months(hi, 1))),
    default_start=start_of_month,
    default_end=lambda today: end_of_month(add_months(start_of_month(today), 5)),
    label=lambda anchor, _last: fmt_month_year(anchor),
    min_width_percent=2.0,
    unit_px=110,
)

VIEW_STRATEGIES: Dict[TimelineView, ViewStrategy] = {
    TimelineView.DAILY: DAILY,
    TimelineView.WEEKLY: WEEKLY,
    TimelineView.MONTHLY: MONTHLY,
}


def strategy_for(view: "TimelineView | str | None") -> ViewStrategy:
    return VIEW_STRATEGIES[TimelineView.parse(view)]


def min_width_percent(view: "TimelineView | str | None") -> float:
    return strategy_for(view).min_width_percent
