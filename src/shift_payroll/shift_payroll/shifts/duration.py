"""Split a shift's elapsed time into normal and night minutes.

Night minutes are counted exactly as a minute-by-minute sweep would count them:
minute k starts at ``start + k min`` (for every k with that instant before
``end``) and is a night minute when its wall-clock hour falls in
[22:00, 24:00) or [00:00, 05:00). Instead of looping over every minute we
count, for each nightly window [d 22:00, d+1 05:00) touched by the shift, how
many of those minute marks fall inside it.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta

from ..common.datetime_utils import MINUTE, whole_minutes
from ..core.constants import NIGHT_END_HOUR, NIGHT_START_HOUR
from .model import ShiftDuration

ONE_DAY = timedelta(days=1)


def _ceil_minutes(delta: timedelta) -> int:
    return -((-delta) // MINUTE)


def count_night_minutes(start: datetime, end: datetime) -> int:
    """Number of minute marks in [start, end) whose hour is inside the night window."""
    if end <= start:
        return 0

    marks = _ceil_minutes(end - start)
    night = 0
    day = start.date() - ONE_DAY
    while day <= end.date():
        window_start = datetime.combine(day, time(NIGHT_START_HOUR), tzinfo=start.tzinfo)
        window_end = datetime.combine(day + ONE_DAY, time(NIGHT_END_HOUR), tzinfo=start.tzinfo)

        first = max(0, _ceil_minutes(window_start - start))
        last = min(marks, _ceil_minutes(window_end - start))
        if last > first:
            night += last - first
        day += ONE_DAY
    return night


def compute_shift_duration(start: datetime, end: datetime, break_minutes: int) -> ShiftDuration:
    """Split one shift into total/normal/night minutes.

    The break is deducted from the total only; night minutes come from the raw
    elapsed time and are then capped so they never exceed the total. Rollover of
    an end time before the start is the caller's job, this function only clamps.
    """
    total = whole_minutes(end - start) - int(break_minutes or 0)
    if total < 0:
        total = 0

    night = count_night_minutes(start, end)
    if night > total:
        night = total

    return ShiftDuration(total_minutes=total, normal_minutes=total - night, night_minutes=night)
