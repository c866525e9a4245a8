# planview/status.py
from __future__ import annotations

import datetime as dt
from typing import Dict, Optional

from .model import PlanTask, TaskStatus

STATUS_COLORS: Dict[TaskStatus, str] = {
    TaskStatus.FUTURE: "#22c55e",
    TaskStatus.IN_PROGRESS: "#f97316",
    TaskStatus.OVERDUE: "#ef4444",
    TaskStatus.NO_DATE: "#cbd5e1",
}

STATUS_LABELS: Dict[TaskStatus, str] = {
    TaskStatus.FUTURE: "Not Started / Future",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.OVERDUE: "Overdue",
    TaskStatus.NO_DATE: "No date range",
}

PRIORITY_COLORS: Dict[str, str] = {
    "urgent": "#ef4444",
    "high": "#f97316",
    "medium": "#eab308",
    "low": "#22c55e",
}
FALLBACK_PRIORITY_COLOR = "#64748b"


def classify_status(task: PlanTask, today: Optional[dt.date] = None) -> TaskStatus:
    if today is None:
        today = dt.date.today()
    end = task.end_date
    if end is None:
        return TaskStatus.NO_DATE
    # overdue wins over in-progress
    if end < today:
        return TaskStatus.OVERDUE
    start = task.start_date
    if start is not None and start <= today <= end:
        return TaskStatus.IN_PROGRESS
    return TaskStatus.FUTURE


def status_color(status: TaskStatus) -> str:
    return STATUS_COLORS[status]


def priority_color(priority: Optional[str]) -> str:
    return PRIORITY_COLORS.get(str(priority or "").strip().lower(), FALLBACK_PRIORITY_COLOR)
