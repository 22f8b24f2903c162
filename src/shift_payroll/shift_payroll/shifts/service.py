from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.validators import require_non_negative_int
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


def build_shift_times(
    work_date: str, start: str, end: Optional[str]
) -> tuple[date, datetime, Optional[datetime]]:
    """Combine a YYYY-MM-DD date with HH:MM times.

    An end at or before the start is taken to be on the next day.
    """
    day = parse_iso_date(work_date)
    start_time = datetime.combine(day, parse_hhmm(start))
    if not end:
        return day, start_time, None

    end_time = datetime.combine(day, parse_hhmm(end))
    if end_time <= start_time:
        end_time += timedelta(days=1)
    return day, start_time, end_time


class ShiftService:
    def __init__(self, shifts: ShiftRepository, employees: EmployeeRepository):
        self._shifts = shifts
        self._employees = employees

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")

    def get(self, shift_id: int) -> Shift:
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            raise NotFoundError(f"Shift {shift_id} does not exist")
        return shift

    def add(
        self,
        *,
        employee_id: int,
        work_date: str,
        start: str,
        end: Optional[str],
        break_minutes: int = 0,
    ) -> int:
        self._require_employee(employee_id)
        day, start_time, end_time = build_shift_times(work_date, start, end)
        break_minutes = require_non_negative_int(break_minutes, "break_minutes")

        shift_id = self._shifts.create(
            employee_id=employee_id,
            work_date=day,
            start_time=start_time,
            end_time=end_time,
            break_minutes=break_minutes,
        )
        logger.info("Logged shift %s for employee %s on %s", shift_id, employee_id, day)
        return shift_id

    def update(
        self,
        *,
        shift_id: int,
        work_date: str,
        start: str,
        end: Optional[str],
        break_minutes: int = 0,
    ) -> None:
        self.get(shift_id)
        day, start_time, end_time = build_shift_times(work_date, start, end)
        break_minutes = require_non_negative_int(break_minutes, "break_minutes")

        if not self._shifts.update(
            shift_id=shift_id,
            work_date=day,
            start_time=start_time,
            end_time=end_time,
            break_minutes=break_minutes,
        ):
            raise ValidationError("Shift update failed")
        logger.info("Updated shift %s", shift_id)

    def delete(self, *, shift_id: int) -> None:
        if not self._shifts.delete(shift_id=shift_id):
            raise NotFoundError(f"Shift {shift_id} does not exist")
        logger.info("Deleted shift %s", shift_id)

    def list_for_employee(self, employee_id: int) -> Sequence[Shift]:
        self._require_employee(employee_id)
        return self._shifts.list_for_employee(employee_id)
