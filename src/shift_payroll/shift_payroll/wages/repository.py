from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import WageSetting


class WageRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[WageSetting]:
        """Wage settings of one employee in recording order.

        Recording order (creation, or last update) is the tie-break between
        settings effective on the same day, so implementations must keep it.
        """

        raise NotImplementedError

    def find_by_effective_from(self, *, employee_id: int, effective_from: datetime) -> Optional[WageSetting]:
        raise NotImplementedError

    def create(self, *, employee_id: int, hourly_wage: int, transportation: int, effective_from: datetime) -> int:
        raise NotImplementedError

    def update(self, *, wage_id: int, hourly_wage: int, transportation: int) -> bool:
        raise NotImplementedError
