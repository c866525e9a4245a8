from __future__ import annotations

import datetime as dt
import unittest

from planview.model import PlanTask, TaskStatus
from planview.status import (
    FALLBACK_PRIORITY_COLOR,
    STATUS_COLORS,
    classify_status,
    priority_color,
    status_color,
)

TODAY = dt.date(2024, 6, 15)


def _task(start=None, end=None) -> PlanTask:
    return PlanTask(id="t", description="t", start_date=start, end_date=end)


class TestStatusClassifierContract(unittest.TestCase):
    def test_reference_cases(self) -> None:
        self.assertEqual(classify_status(_task(dt.date(2024, 5, 20), dt.date(2024, 6, 1)), TODAY), TaskStatus.OVERDUE)
        self.assertEqual(
            classify_status(_task(dt.date(2024, 6, 10), dt.date(2024, 6, 20)), TODAY), TaskStatus.IN_PROGRESS
        )
        self.assertEqual(classify_status(_task(dt.date(2024, 7, 1), dt.date(2024, 7, 10)), TODAY), TaskStatus.FUTURE)
        self.assertEqual(classify_status(_task(dt.date(2024, 7, 1), None), TODAY), TaskStatus.NO_DATE)
        self.assertEqual(classify_status(_task(), TODAY), TaskStatus.NO_DATE)

    def test_boundaries_are_inclusive(self) -> None:
        self.assertEqual(classify_status(_task(TODAY, TODAY), TODAY), TaskStatus.IN_PROGRESS)
        self.assertEqual(classify_status(_task(dt.date(2024, 6, 1), TODAY), TODAY), TaskStatus.IN_PROGRESS)
        self.assertEqual(classify_status(_task(TODAY, dt.date(2024, 6, 30)), TODAY), TaskStatus.IN_PROGRESS)
        self.assertEqual(classify_status(_task(None, dt.date(2024, 6, 14)), TODAY), TaskStatus.OVERDUE)

    def test_overdue_wins_over_in_progress(self) -> None:
        # Inverted range: start <= today and end < today.
        self.assertEqual(classify_status(_task(dt.date(2024, 6, 10), dt.date(2024, 6, 1)), TODAY), TaskStatus.OVERDUE)

    def test_end_only_in_future_is_future(self) -> None:
        self.assertEqual(classify_status(_task(None, dt.date(2024, 6, 20)), TODAY), TaskStatus.FUTURE)

    def test_colors(self) -> None:
        self.assertEqual(status_color(TaskStatus.OVERDUE), "#ef4444")
        self.assertEqual(set(STATUS_COLORS), set(TaskStatus))
        self.assertEqual(priority_color("URGENT"), priority_color("urgent"))
        self.assertEqual(priority_color("unknown"), FALLBACK_PRIORITY_COLOR)
        self.assertEqual(priority_color(None), FALLBACK_PRIORITY_COLOR)


if __name__ == "__main__":
    unittest.main(verbosity=2)
