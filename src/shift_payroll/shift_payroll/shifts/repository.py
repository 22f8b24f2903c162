from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Shift]:
        """Shifts of one employee, most recent `work_date` first."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        start_time: datetime,
        end_time: Optional[datetime],
        break_minutes: int,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        shift_id: int,
        work_date: date,
        start_time: datetime,
        end_time: Optional[datetime],
        break_minutes: int,
    ) -> bool:
        raise NotImplementedError

    def delete(self, *, shift_id: int) -> bool:
        raise NotImplementedError
