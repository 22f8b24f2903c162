from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no storage code). Wage history and shifts are
    kept by their own repositories, keyed by `employee_id`.
    """

    employee_id: int
    name: str
    email: str
