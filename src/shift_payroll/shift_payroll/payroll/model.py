from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import format_minutes, isoformat_or_none
from ..shifts.model import Shift, ShiftDuration


@dataclass(frozen=True)
class ShiftPayDetail:
    """One shift as listed on a period summary / payslip."""

    shift_id: int
    work_date: date
    start_time: datetime
    end_time: Optional[datetime]
    break_minutes: int
    total_minutes: int
    night_minutes: int
    pay: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shift_id": self.shift_id,
            "date": self.work_date.isoformat(),
            "start_time": self.start_time.isoformat(),
            "end_time": isoformat_or_none(self.end_time),
            "break_minutes": self.break_minutes,
            "total_minutes": self.total_minutes,
            "night_minutes": self.night_minutes,
            "worked_hours": format_minutes(self.total_minutes),
            "pay": self.pay,
        }


@dataclass
class MonthlySummary:
    """Rollup of one pay period (26th..25th), built up shift by shift."""

    period_key: str
    period_start: date
    period_end: date
    total_pay: int = 0
    base_pay: int = 0
    night_allowance: int = 0
    total_transport: int = 0
    total_minutes: int = 0
    night_minutes: int = 0
    days_worked: int = 0
    representative_hourly_wage: int = 0
    shifts: List[ShiftPayDetail] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.period_key,
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "total_pay": self.total_pay,
            "base_pay": self.base_pay,
            "night_allowance": self.night_allowance,
            "total_transport": self.total_transport,
            "total_minutes": self.total_minutes,
            "night_minutes": self.night_minutes,
            "days_worked": self.days_worked,
            "hourly_wage": self.representative_hourly_wage,
            "shifts": [s.to_dict() for s in self.shifts],
        }


@dataclass(frozen=True)
class YearlyProgress:
    year: int
    total_pay: int
    remaining: int
    percentage_consumed: float
    is_within_threshold: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "total_pay": self.total_pay,
            "remaining": self.remaining,
            "percentage_consumed": round(self.percentage_consumed, 1),
            "is_within_threshold": self.is_within_threshold,
        }


@dataclass(frozen=True)
class ShiftHistoryRow:
    """Display row for the shift history table."""

    shift: Shift
    duration: ShiftDuration
    hourly_wage: int
    pay: int

    @property
    def crosses_midnight(self) -> bool:
        end = self.shift.end_time
        return end is not None and end.date() != self.shift.start_time.date()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shift_id": self.shift.shift_id,
            "date": self.shift.work_date.isoformat(),
            "start_time": self.shift.start_time.isoformat(),
            "end_time": isoformat_or_none(self.shift.end_time),
            "break_minutes": self.shift.break_minutes,
            "crosses_midnight": self.crosses_midnight,
            "total_minutes": self.duration.total_minutes,
            "normal_minutes": self.duration.normal_minutes,
            "night_minutes": self.duration.night_minutes,
            "hourly_wage": self.hourly_wage,
            "pay": self.pay,
        }


@dataclass(frozen=True)
class Payslip:
    """Everything a payslip document generator needs for one employee and period."""

    employee_name: str
    period_key: str
    period_start: date
    period_end: date
    hourly_wage: int
    days_worked: int
    total_minutes: int
    night_minutes: int
    base_pay: int
    night_allowance: int
    transportation: int
    total_pay: int
    issued_date: date
    shifts: List[ShiftPayDetail]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "employee_name": self.employee_name,
            "period": self.period_key,
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "hourly_wage": self.hourly_wage,
            "days_worked": self.days_worked,
            "total_hours": format_minutes(self.total_minutes),
            "night_hours": format_minutes(self.night_minutes),
            "base_pay": self.base_pay,
            "night_allowance": self.night_allowance,
            "transportation": self.transportation,
            "total_pay": self.total_pay,
            "issued_date": self.issued_date.isoformat(),
            "shifts": [s.to_dict() for s in self.shifts],
        }
