from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from .model import WageSetting
from .repository import WageRepository


class InMemoryWageRepository(WageRepository):
    def __init__(self):
        # dict keeps insertion order; updates re-insert to mark the setting as most recent.
        self._by_id: dict[int, WageSetting] = {}
        self._id = 0

    def list_for_employee(self, employee_id: int) -> Sequence[WageSetting]:
        return [w for w in self._by_id.values() if w.employee_id == int(employee_id)]

    def find_by_effective_from(self, *, employee_id: int, effective_from: datetime) -> Optional[WageSetting]:
        for w in self._by_id.values():
            if w.employee_id == int(employee_id) and w.effective_from == effective_from:
                return w
        return None

    def create(self, *, employee_id: int, hourly_wage: int, transportation: int, effective_from: datetime) -> int:
        setting = WageSetting(
            wage_id=self._id + 1,
            employee_id=int(employee_id),
            hourly_wage=hourly_wage,
            transportation=transportation,
            effective_from=effective_from,
        )
        self._id += 1
        self._by_id[self._id] = setting
        return self._id

    def update(self, *, wage_id: int, hourly_wage: int, transportation: int) -> bool:
        current = self._by_id.pop(int(wage_id), None)
        if current is None:
            return False
        self._by_id[current.wage_id] = replace(current, hourly_wage=hourly_wage, transportation=transportation)
        return True
