from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from .model import Shift
from .repository import ShiftRepository


class InMemoryShiftRepository(ShiftRepository):
    def __init__(self):
        self._by_id: dict[int, Shift] = {}
        self._id = 0

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self._by_id.get(int(shift_id))

    def list_for_employee(self, employee_id: int) -> Sequence[Shift]:
        items = [s for s in self._by_id.values() if s.employee_id == int(employee_id)]
        items.sort(key=lambda s: s.work_date, reverse=True)
        return items

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        start_time: datetime,
        end_time: Optional[datetime],
        break_minutes: int,
    ) -> int:
        self._id += 1
        self._by_id[self._id] = Shift(
            shift_id=self._id,
            employee_id=int(employee_id),
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
            break_minutes=int(break_minutes),
        )
        return self._id

    def update(
        self,
        *,
        shift_id: int,
        work_date: date,
        start_time: datetime,
        end_time: Optional[datetime],
        break_minutes: int,
    ) -> bool:
        current = self._by_id.get(int(shift_id))
        if current is None:
            return False
        self._by_id[current.shift_id] = replace(
            current,
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
            break_minutes=int(break_minutes),
        )
        return True

    def delete(self, *, shift_id: int) -> bool:
        return self._by_id.pop(int(shift_id), None) is not None
