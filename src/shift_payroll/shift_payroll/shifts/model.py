from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: one worked interval.

    `work_date` is the day the shift is attributed to, independent of the actual
    start/end (shifts may cross midnight). `end_time` is None while the shift is open.
    """

    shift_id: int
    employee_id: int
    work_date: date
    start_time: datetime
    end_time: Optional[datetime]
    break_minutes: int = 0

    def end_or(self, now: datetime) -> datetime:
        return self.end_time if self.end_time is not None else now


@dataclass(frozen=True)
class ShiftDuration:
    """Derived split of one shift's paid minutes (never persisted)."""

    total_minutes: int
    normal_minutes: int
    night_minutes: int
