from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..shifts.duration import compute_shift_duration
from ..shifts.model import Shift
from ..wages.model import WageSetting
from ..wages.timeline import WageTimeline
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import MonthlySummary, ShiftHistoryRow, ShiftPayDetail
from .periods import period_bounds, period_key_for


def aggregate_by_period(
    shifts: Iterable[Shift],
    wages: Iterable[WageSetting],
    *,
    now: datetime,
    calculator: Optional[PayrollCalculator] = None,
) -> list[MonthlySummary]:
    """Fold shifts into pay-period summaries, most recent period first.

    Shifts are folded in input order. `representative_hourly_wage` is the wage of
    the last shift folded into each period, so reordering the input can change it.
    Open shifts are measured up to `now`.
    """
    timeline = WageTimeline(wages)
    calculator = calculator or StandardPayrollCalculator()
    groups: dict[str, MonthlySummary] = {}

    for shift in shifts:
        key = period_key_for(shift.work_date)
        setting = timeline.resolve(shift.work_date)
        hourly_wage = setting.hourly_wage if setting else 0
        transport = setting.transportation if setting else 0

        summary = groups.get(key)
        if summary is None:
            start, end = period_bounds(key)
            summary = MonthlySummary(period_key=key, period_start=start, period_end=end)
            groups[key] = summary
        summary.representative_hourly_wage = hourly_wage

        duration = compute_shift_duration(shift.start_time, shift.end_or(now), shift.break_minutes)
        breakdown = calculator.period_breakdown(duration, hourly_wage)

        summary.total_pay += breakdown.pay
        summary.base_pay += breakdown.base_pay
        summary.night_allowance += breakdown.night_allowance
        summary.total_minutes += duration.total_minutes
        summary.night_minutes += duration.night_minutes
        summary.days_worked += 1
        summary.total_transport += transport
        summary.shifts.append(
            ShiftPayDetail(
                shift_id=shift.shift_id,
                work_date=shift.work_date,
                start_time=shift.start_time,
                end_time=shift.end_time,
                break_minutes=shift.break_minutes,
                total_minutes=duration.total_minutes,
                night_minutes=duration.night_minutes,
                pay=breakdown.pay,
            )
        )

    summaries = sorted(groups.values(), key=lambda s: s.period_key, reverse=True)
    for summary in summaries:
        summary.shifts.sort(key=lambda d: d.work_date)
    return summaries


def shift_history(
    shifts: Iterable[Shift],
    wages: Iterable[WageSetting],
    *,
    now: datetime,
    calculator: Optional[PayrollCalculator] = None,
) -> list[ShiftHistoryRow]:
    """Per-shift display rows using single-shift (combined floor) pay.

    The wage is resolved from the shift's start timestamp.
    """
    timeline = WageTimeline(wages)
    calculator = calculator or StandardPayrollCalculator()

    rows: list[ShiftHistoryRow] = []
    for shift in shifts:
        setting = timeline.resolve(shift.start_time)
        hourly_wage = setting.hourly_wage if setting else 0
        duration = compute_shift_duration(shift.start_time, shift.end_or(now), shift.break_minutes)
        rows.append(
            ShiftHistoryRow(
                shift=shift,
                duration=duration,
                hourly_wage=hourly_wage,
                pay=calculator.shift_pay(duration, hourly_wage),
            )
        )
    return rows
