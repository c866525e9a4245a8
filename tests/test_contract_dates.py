from __future__ import annotations

import datetime as dt
import unittest

from planview.util.dates import (
    add_days,
    add_months,
    coerce_date,
    end_of_month,
    fmt_long,
    fmt_month_day,
    fmt_month_year,
    start_of_month,
    start_of_week,
)


class TestDateMathContract(unittest.TestCase):
    def test_start_of_week_is_monday(self) -> None:
        self.assertEqual(start_of_week(dt.date(2024, 6, 3)), dt.date(2024, 6, 3))
        self.assertEqual(start_of_week(dt.date(2024, 6, 5)), dt.date(2024, 6, 3))
        # Sunday belongs to the week that started six days earlier.
        self.assertEqual(start_of_week(dt.date(2024, 6, 9)), dt.date(2024, 6, 3))
        # Crosses a year boundary.
        self.assertEqual(start_of_week(dt.date(2025, 1, 1)), dt.date(2024, 12, 30))

    def test_month_bounds(self) -> None:
        self.assertEqual(start_of_month(dt.date(2024, 6, 17)), dt.date(2024, 6, 1))
        self.assertEqual(end_of_month(dt.date(2024, 2, 10)), dt.date(2024, 2, 29))
        self.assertEqual(end_of_month(dt.date(2023, 2, 10)), dt.date(2023, 2, 28))
        self.assertEqual(end_of_month(dt.date(2024, 12, 1)), dt.date(2024, 12, 31))

    def test_add_days_and_months(self) -> None:
        self.assertEqual(add_days(dt.date(2024, 2, 28), 1), dt.date(2024, 2, 29))
        self.assertEqual(add_days(dt.date(2024, 1, 1), -1), dt.date(2023, 12, 31))
        self.assertEqual(add_months(dt.date(2024, 1, 31), 1), dt.date(2024, 2, 29))
        self.assertEqual(add_months(dt.date(2023, 1, 31), 1), dt.date(2023, 2, 28))
        self.assertEqual(add_months(dt.date(2024, 11, 15), 3), dt.date(2025, 2, 15))
        self.assertEqual(add_months(dt.date(2024, 1, 15), -1), dt.date(2023, 12, 15))

    def test_coerce_date(self) -> None:
        self.assertEqual(coerce_date("2024-06-03"), dt.date(2024, 6, 3))
        self.assertEqual(coerce_date("2024-06-03T10:30:00.000Z"), dt.date(2024, 6, 3))
        self.assertEqual(coerce_date(dt.datetime(2024, 6, 3, 23, 0)), dt.date(2024, 6, 3))
        self.assertIsNone(coerce_date(None))
        self.assertIsNone(coerce_date(""))
        self.assertIsNone(coerce_date("next tuesday"))
        self.assertIsNone(coerce_date("2024-02-30"))

    def test_labels_do_not_depend_on_locale(self) -> None:
        d = dt.date(2024, 6, 3)
        self.assertEqual(fmt_month_day(d), "Jun 3")
        self.assertEqual(fmt_month_year(d), "Jun 2024")
        self.assertEqual(fmt_long(d), "Mon, Jun 3, 2024")


if __name__ == "__main__":
    unittest.main(verbosity=2)
