from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..shifts.repository import ShiftRepository
from ..wages.repository import WageRepository
from .aggregator import aggregate_by_period, shift_history
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import MonthlySummary, Payslip, ShiftHistoryRow, YearlyProgress
from .periods import parse_period_key, shifts_in_period
from .yearly import yearly_progress

logger = logging.getLogger(__name__)


class PayrollReportService:
    """Loads an employee's shifts and wage history and runs the payroll engine on them.

    The clock is read at most once per call (when `now` is not given) and handed
    to the engine explicitly.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        wages: WageRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._shifts = shifts
        self._wages = wages
        self._calculator = calculator or StandardPayrollCalculator()

    def _require_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def monthly_summaries(self, employee_id: int, *, now: Optional[datetime] = None) -> list[MonthlySummary]:
        now = now or now_local()
        self._require_employee(employee_id)
        shifts = self._shifts.list_for_employee(employee_id)
        summaries = aggregate_by_period(
            shifts,
            self._wages.list_for_employee(employee_id),
            now=now,
            calculator=self._calculator,
        )
        logger.debug("Aggregated %s shifts into %s periods for employee %s", len(shifts), len(summaries), employee_id)
        return summaries

    def yearly_progress(
        self,
        employee_id: int,
        *,
        year: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> YearlyProgress:
        now = now or now_local()
        self._require_employee(employee_id)
        progress = yearly_progress(
            self._shifts.list_for_employee(employee_id),
            self._wages.list_for_employee(employee_id),
            year or now.year,
            now=now,
            calculator=self._calculator,
        )
        if not progress.is_within_threshold:
            logger.info("Employee %s reached the annual income threshold for %s", employee_id, progress.year)
        return progress

    def shift_history(
        self,
        employee_id: int,
        *,
        period_key: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> list[ShiftHistoryRow]:
        now = now or now_local()
        self._require_employee(employee_id)
        shifts = self._shifts.list_for_employee(employee_id)
        if period_key:
            shifts = shifts_in_period(shifts, period_key)
        return shift_history(
            shifts,
            self._wages.list_for_employee(employee_id),
            now=now,
            calculator=self._calculator,
        )

    def payslip(self, employee_id: int, period_key: str, *, now: Optional[datetime] = None) -> Payslip:
        now = now or now_local()
        parse_period_key(period_key)
        employee = self._require_employee(employee_id)

        summary = next(
            (s for s in self.monthly_summaries(employee_id, now=now) if s.period_key == period_key),
            None,
        )
        if summary is None:
            raise NotFoundError(f"No shifts for employee {employee_id} in period {period_key}")

        return Payslip(
            employee_name=employee.name,
            period_key=summary.period_key,
            period_start=summary.period_start,
            period_end=summary.period_end,
            hourly_wage=summary.representative_hourly_wage,
            days_worked=summary.days_worked,
            total_minutes=summary.total_minutes,
            night_minutes=summary.night_minutes,
            base_pay=summary.base_pay,
            night_allowance=summary.night_allowance,
            transportation=summary.total_transport,
            total_pay=summary.total_pay + summary.total_transport,
            issued_date=now.date(),
            shifts=list(summary.shifts),
        )
