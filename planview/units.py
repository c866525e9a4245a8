# planview/units.py
from __future__ import annotations

from typing import List

from .model import TimelineView, TimeUnit, Window
from .util.dates import fmt_long
from .views import strategy_for

# Hard stop for pathological windows (roughly 27 years of days).
MAX_UNITS = 10_000


def generate_time_units(window: Window, view: "TimelineView | str | None") -> List[TimeUnit]:
    """Ordered, gap-free axis cells covering `window` at `view` granularity.

    The first anchor is the window start aligned to the view (ISO Monday for
    weekly, first of month for monthly); generation stops once an anchor
    passes `window.end`. A window with start > end still yields its first unit.
    """
    strat = strategy_for(view)
    units: List[TimeUnit] = []

    cur = strat.align(window.start)
    while True:
        last = strat.unit_end(cur)
        units.append(TimeUnit(date=cur, label=strat.label(cur, last), end=last, title=fmt_long(cur)))
        cur = strat.step(cur)
        if cur > window.end or len(units) >= MAX_UNITS:
            break
    return units
