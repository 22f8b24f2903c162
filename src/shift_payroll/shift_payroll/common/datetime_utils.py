from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.exceptions import ValidationError

MINUTE = timedelta(minutes=1)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    try:
        return datetime.strptime((value or "").strip(), "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def as_day(value: date | datetime) -> date:
    """Normalize a date or timestamp to its calendar day (midnight granularity)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def whole_minutes(delta: timedelta) -> int:
    """Elapsed whole minutes, truncated toward zero."""
    if delta >= timedelta(0):
        return delta // MINUTE
    return -((-delta) // MINUTE)


def format_minutes(minutes: int) -> str:
    """Format a minute count as HH:MM."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def isoformat_or_none(value: Optional[date | datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier. Calculations never call this;
    services read it once and pass the value down.
    """
    return datetime.now()
