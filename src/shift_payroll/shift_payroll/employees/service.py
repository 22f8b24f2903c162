from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty, require_non_negative_int
from ..core.exceptions import NotFoundError, ValidationError
from ..wages.repository import WageRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, wages: WageRepository):
        self._employees = employees
        self._wages = wages

    def register(
        self,
        *,
        name: str,
        email: str,
        hourly_wage: int,
        transportation: int,
        now: Optional[datetime] = None,
    ) -> int:
        """Create an employee together with an initial wage setting effective now."""
        now = now or now_local()
        name = require_non_empty(name, "name")
        email = require_non_empty(email, "email")
        if "@" not in email:
            raise ValidationError("email is not valid")
        hourly_wage = require_non_negative_int(hourly_wage, "hourly_wage")
        transportation = require_non_negative_int(transportation, "transportation")

        employee_id = self._employees.create(name=name, email=email)
        self._wages.create(
            employee_id=employee_id,
            hourly_wage=hourly_wage,
            transportation=transportation,
            effective_from=now,
        )
        logger.info("Registered employee %s with hourly wage %s", employee_id, hourly_wage)
        return employee_id

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()
