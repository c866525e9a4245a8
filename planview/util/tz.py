# planview/util/tz.py
from __future__ import annotations

import datetime as dt
import os
import re
from typing import Optional

try:
    from zoneinfo import ZoneInfo  # py3.9+
except Exception:  # pragma: no cover
    ZoneInfo = None  # type: ignore

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

DAY_MS = 86_400_000


def normalize_tz_name(name: Optional[str]) -> str:
    """Canonical timezone name for the plan view.

      - None/"" -> "local"
      - "local" / "system" -> "local"
      - "UTC" / "Z" / "GMT" -> "UTC"
      - anything else (IANA names, "+02:00" offsets) is kept as given
    """
    if name is None:
        return "local"
    s = str(name).strip()
    if not s:
        return "local"

    low = s.lower()
    if low in {"local", "system", "native"}:
        return "local"
    if low in {"utc", "z", "gmt", "utc0", "utc+0"}:
        return "UTC"
    return s


def default_tz_name() -> str:
    return normalize_tz_name(os.getenv("PLANVIEW_TZ", "local"))


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve a timezone name into a tzinfo.

    Raises ValueError for identifiers that are neither "local", "UTC", a fixed
    offset nor a known IANA zone.
    """
    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return dt.timezone.utc

    if tz_name == "local":
        tz = dt.datetime.now().astimezone().tzinfo
        return tz or dt.timezone.utc

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        return dt.timezone(dt.timedelta(minutes=sign * (hh * 60 + mm)))

    if ZoneInfo is not None:
        try:
            return ZoneInfo(tz_name)  # type: ignore[misc]
        except Exception as ex:
            raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex

    raise ValueError(f"Invalid timezone identifier: {tz_name!r} (zoneinfo unavailable)")


def as_tzinfo(tz: "dt.tzinfo | str | None") -> dt.tzinfo:
    if isinstance(tz, dt.tzinfo):
        return tz
    return resolve_tz(tz)


def today_date(tz: "dt.tzinfo | str | None" = None) -> dt.date:
    return dt.datetime.now(tz=as_tzinfo(tz)).date()


def day_start_ms(d: dt.date, tz: "dt.tzinfo | str | None" = None) -> int:
    """Epoch ms of local midnight at the start of `d`."""
    tzinfo = as_tzinfo(tz)
    aware = dt.datetime(d.year, d.month, d.day, 0, 0, 0, tzinfo=tzinfo)
    return int(aware.timestamp() * 1000)


def day_end_ms(d: dt.date, tz: "dt.tzinfo | str | None" = None) -> int:
    """Epoch ms of 23:59:59.999 on `d` (one ms before the next local midnight)."""
    return day_start_ms(d + dt.timedelta(days=1), tz) - 1
