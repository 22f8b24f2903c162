from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import require_non_negative_int
from ..core.constants import WAGE_REVISION_TIME
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import WageSetting
from .repository import WageRepository
from .timeline import resolve_wage

logger = logging.getLogger(__name__)


class WageService:
    def __init__(self, wages: WageRepository, employees: EmployeeRepository):
        self._wages = wages
        self._employees = employees

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")

    @staticmethod
    def effective_from_for(effective_date: Optional[str | date], now: datetime) -> datetime:
        """A date-only revision takes effect at 23:59:59.999 of that day, otherwise now."""
        if effective_date in (None, ""):
            return now
        if isinstance(effective_date, str):
            effective_date = parse_iso_date(effective_date)
        return datetime.combine(effective_date, WAGE_REVISION_TIME)

    def revise(
        self,
        *,
        employee_id: int,
        hourly_wage: int,
        transportation: int,
        effective_date: Optional[str | date] = None,
        now: Optional[datetime] = None,
    ) -> int:
        """Record a wage revision; returns the wage_id.

        Revising the same effective timestamp twice updates the existing setting
        instead of stacking a duplicate. Past dates are allowed and change the pay
        of every period from that day on.
        """
        now = now or now_local()
        self._require_employee(employee_id)
        hourly_wage = require_non_negative_int(hourly_wage, "hourly_wage")
        transportation = require_non_negative_int(transportation, "transportation")
        effective_from = self.effective_from_for(effective_date, now)

        existing = self._wages.find_by_effective_from(employee_id=employee_id, effective_from=effective_from)
        if existing:
            self._wages.update(wage_id=existing.wage_id, hourly_wage=hourly_wage, transportation=transportation)
            logger.info("Updated wage %s for employee %s effective %s", existing.wage_id, employee_id, effective_from)
            return existing.wage_id

        wage_id = self._wages.create(
            employee_id=employee_id,
            hourly_wage=hourly_wage,
            transportation=transportation,
            effective_from=effective_from,
        )
        logger.info("Created wage %s for employee %s effective %s", wage_id, employee_id, effective_from)
        return wage_id

    def history(self, employee_id: int) -> Sequence[WageSetting]:
        self._require_employee(employee_id)
        return self._wages.list_for_employee(employee_id)

    def current(self, employee_id: int, *, now: Optional[datetime] = None) -> Optional[WageSetting]:
        now = now or now_local()
        self._require_employee(employee_id)
        return resolve_wage(self._wages.list_for_employee(employee_id), now)
