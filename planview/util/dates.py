# planview/util/dates.py
from __future__ import annotations

import calendar
import datetime as dt
import re
from typing import Optional

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def start_of_week(d: dt.date) -> dt.date:
    # date.weekday(): Monday == 0, Sunday == 6
    return d - dt.timedelta(days=d.weekday())


def start_of_month(d: dt.date) -> dt.date:
    return d.replace(day=1)


def end_of_month(d: dt.date) -> dt.date:
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def add_days(d: dt.date, n: int) -> dt.date:
    return d + dt.timedelta(days=int(n))


def add_months(d: dt.date, n: int) -> dt.date:
    """Step whole months, clamping the day to the target month (Jan 31 + 1 -> Feb 28/29)."""
    idx = d.year * 12 + (d.month - 1) + int(n)
    year, month0 = divmod(idx, 12)
    last = calendar.monthrange(year, month0 + 1)[1]
    return dt.date(year, month0 + 1, min(d.day, last))


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()


def coerce_date(value: object) -> Optional[dt.date]:
    """Calendar date from a date/datetime/ISO string, or None when absent or unparsable.

    ISO datetimes keep only their calendar date part; no timezone shifting is applied.
    """
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    s = str(value).strip()
    if not s:
        return None
    m = _ISO_DATE_RE.match(s)
    if not m:
        return None
    try:
        return dt.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def fmt_month_day(d: dt.date) -> str:
    return f"{MONTH_ABBR[d.month - 1]} {d.day}"


def fmt_month_year(d: dt.date) -> str:
    return f"{MONTH_ABBR[d.month - 1]} {d.year}"


def fmt_long(d: dt.date) -> str:
    return f"{WEEKDAY_ABBR[d.weekday()]}, {MONTH_ABBR[d.month - 1]} {d.day}, {d.year}"
