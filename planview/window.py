# planview/window.py
from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional

from .model import PlanTask, TimelineView, Window
from .views import strategy_for


def collect_task_dates(tasks: Iterable[PlanTask]) -> List[dt.date]:
    out: List[dt.date] = []
    for t in tasks:
        if t.start_date is not None:
            out.append(t.start_date)
        if t.end_date is not None:
            out.append(t.end_date)
    return out


def infer_window(
    tasks: Iterable[PlanTask],
    view: "TimelineView | str | None",
    today: Optional[dt.date] = None,
) -> Window:
    """
    Visible window for `tasks` at `view` granularity.

    Every start/end date counts, including tasks with only one of the two.
    Without any date the window is anchored at `today`; otherwise the
    [min, max] range is padded outward so no task sits flush on an axis edge.
    """
    strat = strategy_for(view)
    dates = collect_task_dates(tasks)

    if not dates:
        if today is None:
            today = dt.date.today()
        return Window(start=strat.default_start(today), end=strat.default_end(today))

    start, end = strat.pad(min(dates), max(dates))
    return Window(start=start, end=end)
