"""Pay periods close on the 25th: period `YYYY-MM` runs from the 26th of the
prior month through the 25th of month `MM`."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Iterable

from ..common.datetime_utils import as_day
from ..core.constants import CLOSING_DAY
from ..core.exceptions import ValidationError
from ..shifts.model import Shift

_PERIOD_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def _next_month(year: int, month: int) -> tuple[int, int]:
    return (year + 1, 1) if month == 12 else (year, month + 1)


def _previous_month(year: int, month: int) -> tuple[int, int]:
    return (year - 1, 12) if month == 1 else (year, month - 1)


def period_key_for(work_date: date | datetime) -> str:
    day = as_day(work_date)
    year, month = day.year, day.month
    if day.day > CLOSING_DAY:
        year, month = _next_month(year, month)
    return f"{year:04d}-{month:02d}"


def parse_period_key(period_key: str) -> tuple[int, int]:
    m = _PERIOD_KEY.match((period_key or "").strip())
    if not m or not 1 <= int(m.group(2)) <= 12:
        raise ValidationError(f"Invalid pay period (YYYY-MM): {period_key!r}")
    return int(m.group(1)), int(m.group(2))


def period_bounds(period_key: str) -> tuple[date, date]:
    """(period_start, period_end), both inclusive."""
    year, month = parse_period_key(period_key)
    prev_year, prev_month = _previous_month(year, month)
    return date(prev_year, prev_month, CLOSING_DAY + 1), date(year, month, CLOSING_DAY)


def in_period(work_date: date | datetime, period_key: str) -> bool:
    start, end = period_bounds(period_key)
    return start <= as_day(work_date) <= end


def shifts_in_period(shifts: Iterable[Shift], period_key: str) -> list[Shift]:
    """Shifts attributed to the given period, input order preserved."""
    parse_period_key(period_key)
    return [s for s in shifts if in_period(s.work_date, period_key)]
