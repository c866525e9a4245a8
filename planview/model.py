# planview/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class TimelineView(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: "TimelineView | str | None") -> "TimelineView":
        if isinstance(value, TimelineView):
            return value
        if value is None:
            return DEFAULT_VIEW
        s = str(value).strip().lower()
        for v in cls:
            if v.value == s:
                return v
        raise ValueError(f"Unknown timeline view: {value!r} (expected daily, weekly or monthly)")


DEFAULT_VIEW = TimelineView.MONTHLY


class TaskStatus(str, Enum):
    FUTURE = "future"
    IN_PROGRESS = "in_progress"
    OVERDUE = "overdue"
    NO_DATE = "no_date"


PRIORITIES = ("low", "medium", "high", "urgent")


@dataclass(frozen=True)
class PlanTask:
    id: str
    description: str
    responsible_ids: Tuple[str, ...] = ()
    priority: str = "medium"
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    comment: str = ""

    project_id: str = ""
    project_name: str = ""
    axe_id: str = ""
    axe_name: str = ""

    @property
    def has_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None


@dataclass(frozen=True)
class Window:
    start: dt.date
    end: dt.date


@dataclass(frozen=True)
class TimeUnit:
    date: dt.date      # anchor: day / ISO Monday / first of month
    label: str
    end: dt.date       # last calendar day covered by the unit
    title: str = ""


@dataclass(frozen=True)
class TaskBarGeometry:
    left_percent: float
    width_percent: float


__all__ = [
    "DEFAULT_VIEW",
    "PRIORITIES",
    "PlanTask",
    "TaskBarGeometry",
    "TaskStatus",
    "TimeUnit",
    "TimelineView",
    "Window",
]
