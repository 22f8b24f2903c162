from __future__ import annotations

from typing import Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self):
        self._by_id: dict[int, Employee] = {}
        self._id = 0

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def create(self, *, name: str, email: str) -> int:
        self._id += 1
        self._by_id[self._id] = Employee(employee_id=self._id, name=name, email=email)
        return self._id

    def list_all(self) -> Sequence[Employee]:
        return sorted(self._by_id.values(), key=lambda e: e.employee_id)
