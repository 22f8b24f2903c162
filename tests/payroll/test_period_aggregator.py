from __future__ import annotations

from datetime import datetime
from typing import Optional

from src.shift_payroll.shift_payroll.payroll.aggregator import aggregate_by_period, shift_history
from src.shift_payroll.shift_payroll.shifts.model import Shift
from src.shift_payroll.shift_payroll.shifts.service import build_shift_times
from src.shift_payroll.shift_payroll.wages.model import WageSetting

NOW = datetime(2025, 3, 1, 12, 0)


def _shift(shift_id: int, day: str, start: str, end: Optional[str], break_minutes: int = 0) -> Shift:
    work_date, start_time, end_time = build_shift_times(day, start, end)
    return Shift(
        shift_id=shift_id,
        employee_id=1,
        work_date=work_date,
        start_time=start_time,
        end_time=end_time,
        break_minutes=break_minutes,
    )


def _wage(wage_id: int, hourly: int, effective: datetime, transportation: int = 0) -> WageSetting:
    return WageSetting(
        wage_id=wage_id,
        employee_id=1,
        hourly_wage=hourly,
        transportation=transportation,
        effective_from=effective,
    )


def test_aggregates_into_closing_day_periods_newest_first():
    wages = [_wage(1, 1200, datetime(2025, 1, 1), transportation=500)]
    shifts = [
        _shift(1, "2025-01-24", "22:00", "06:00"),
        _shift(2, "2025-01-26", "09:00", "17:00", 60),
    ]

    summaries = aggregate_by_period(shifts, wages, now=NOW)

    assert [s.period_key for s in summaries] == ["2025-02", "2025-01"]

    feb, jan = summaries
    assert jan.total_pay == 11700
    assert jan.base_pay == 9600
    assert jan.night_allowance == 2100
    assert jan.total_transport == 500
    assert jan.total_minutes == 480
    assert jan.night_minutes == 420
    assert jan.days_worked == 1
    assert jan.period_start.isoformat() == "2024-12-26"
    assert jan.period_end.isoformat() == "2025-01-25"

    assert feb.total_pay == 8400
    assert feb.night_allowance == 0
    assert feb.shifts[0].pay == 8400


def test_split_rounding_accumulates_per_shift():
    wages = [_wage(1, 1001, datetime(2025, 1, 1))]
    shifts = [
        _shift(1, "2025-01-10", "23:00", "23:10"),
        _shift(2, "2025-01-11", "23:00", "23:10"),
    ]

    (jan,) = aggregate_by_period(shifts, wages, now=NOW)

    assert jan.base_pay == 2 * 166
    assert jan.night_allowance == 2 * 41
    assert jan.total_pay == 2 * 208


def test_representative_wage_is_last_processed_shift():
    wages = [_wage(1, 1000, datetime(2025, 1, 1)), _wage(2, 1200, datetime(2025, 1, 10))]
    later = _shift(1, "2025-01-12", "09:00", "10:00")
    earlier = _shift(2, "2025-01-05", "09:00", "10:00")

    (as_given,) = aggregate_by_period([later, earlier], wages, now=NOW)
    (reversed_,) = aggregate_by_period([earlier, later], wages, now=NOW)

    assert as_given.representative_hourly_wage == 1000
    assert reversed_.representative_hourly_wage == 1200
    # Details are always listed by date.
    assert [d.shift_id for d in as_given.shifts] == [2, 1]
    assert as_given.total_pay == reversed_.total_pay == 2200


def test_retroactive_wage_changes_only_later_periods():
    shifts = [_shift(1, "2025-01-05", "09:00", "17:00"), _shift(2, "2025-02-05", "09:00", "17:00")]
    wages = [_wage(1, 1000, datetime(2024, 12, 1))]

    before = {s.period_key: s.total_pay for s in aggregate_by_period(shifts, wages, now=NOW)}

    wages.append(_wage(2, 1300, datetime(2025, 1, 27, 23, 59, 59, 999000)))
    after = {s.period_key: s.total_pay for s in aggregate_by_period(shifts, wages, now=NOW)}

    assert before == {"2025-01": 8000, "2025-02": 8000}
    assert after == {"2025-01": 8000, "2025-02": 10400}


def test_transportation_is_paid_per_shift():
    wages = [_wage(1, 1000, datetime(2025, 1, 1), transportation=450)]
    shifts = [_shift(1, "2025-01-06", "09:00", "12:00"), _shift(2, "2025-01-07", "09:00", "12:00")]

    (jan,) = aggregate_by_period(shifts, wages, now=NOW)

    assert jan.total_transport == 900
    assert jan.days_worked == 2


def test_missing_wage_history_counts_minutes_at_zero_pay():
    (jan,) = aggregate_by_period([_shift(1, "2025-01-06", "09:00", "12:00")], [], now=NOW)

    assert jan.total_minutes == 180
    assert jan.total_pay == 0
    assert jan.representative_hourly_wage == 0


def test_open_shift_is_measured_until_now():
    wages = [_wage(1, 1000, datetime(2025, 1, 1))]
    open_shift = _shift(1, "2025-03-01", "09:00", None)

    (mar,) = aggregate_by_period([open_shift], wages, now=NOW)

    assert mar.total_minutes == 180
    assert mar.shifts[0].end_time is None


def test_shift_history_uses_combined_rounding_and_flags_overnight():
    wages = [_wage(1, 1001, datetime(2025, 1, 1))]
    shifts = [_shift(1, "2025-01-10", "23:50", "00:00"), _shift(2, "2025-01-11", "23:00", "01:00")]

    rows = shift_history(shifts, wages, now=NOW)

    assert rows[0].pay == 208
    assert rows[0].crosses_midnight
    assert rows[1].duration.night_minutes == 120
    assert rows[1].hourly_wage == 1001
