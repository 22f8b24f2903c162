from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .employees.memory_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.base import PayrollCalculator
from .payroll.service import PayrollReportService
from .shifts.memory_repository import InMemoryShiftRepository
from .shifts.service import ShiftService
from .wages.memory_repository import InMemoryWageRepository
from .wages.service import WageService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    shifts_repo: InMemoryShiftRepository
    wages_repo: InMemoryWageRepository

    employee_service: EmployeeService
    shift_service: ShiftService
    wage_service: WageService
    payroll_report_service: PayrollReportService


def build_container(*, calculator: Optional[PayrollCalculator] = None) -> Container:
    employees_repo = InMemoryEmployeeRepository()
    shifts_repo = InMemoryShiftRepository()
    wages_repo = InMemoryWageRepository()

    employee_service = EmployeeService(employees_repo, wages_repo)
    shift_service = ShiftService(shifts_repo, employees_repo)
    wage_service = WageService(wages_repo, employees_repo)
    payroll_report_service = PayrollReportService(employees_repo, shifts_repo, wages_repo, calculator=calculator)

    return Container(
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        wages_repo=wages_repo,
        employee_service=employee_service,
        shift_service=shift_service,
        wage_service=wage_service,
        payroll_report_service=payroll_report_service,
    )
