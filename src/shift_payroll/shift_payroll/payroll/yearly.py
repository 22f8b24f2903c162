from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..core.constants import ANNUAL_INCOME_THRESHOLD
from ..shifts.duration import compute_shift_duration
from ..shifts.model import Shift
from ..wages.model import WageSetting
from ..wages.timeline import WageTimeline
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import YearlyProgress


def yearly_progress(
    shifts: Iterable[Shift],
    wages: Iterable[WageSetting],
    year: int,
    *,
    now: datetime,
    calculator: Optional[PayrollCalculator] = None,
) -> YearlyProgress:
    """Calendar-year earnings against the annual income threshold.

    Uses single-shift pay (combined floor), not the per-period split rounding.
    Reaching the threshold exactly counts as no longer within it.
    """
    timeline = WageTimeline(wages)
    calculator = calculator or StandardPayrollCalculator()

    total = 0
    for shift in shifts:
        if shift.work_date.year != year:
            continue
        setting = timeline.resolve(shift.work_date)
        hourly_wage = setting.hourly_wage if setting else 0
        duration = compute_shift_duration(shift.start_time, shift.end_or(now), shift.break_minutes)
        total += calculator.shift_pay(duration, hourly_wage)

    remaining = ANNUAL_INCOME_THRESHOLD - total
    return YearlyProgress(
        year=year,
        total_pay=total,
        remaining=remaining,
        percentage_consumed=min(total / ANNUAL_INCOME_THRESHOLD * 100, 100.0),
        is_within_threshold=remaining > 0,
    )
