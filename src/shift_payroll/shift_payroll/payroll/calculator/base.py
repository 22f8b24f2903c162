from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...shifts.model import ShiftDuration


@dataclass(frozen=True)
class PayBreakdown:
    """Per-shift amounts as accumulated into a pay period."""

    base_pay: int
    night_allowance: int
    pay: int


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Two rounding paths exist on purpose and must stay separate:
    `shift_pay` floors once over the combined amount (single-shift display and
    the yearly threshold), `period_breakdown` floors base and night allowance
    separately per shift (period aggregation and payslips).
    """

    @abstractmethod
    def shift_pay(self, duration: ShiftDuration, hourly_wage: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def period_breakdown(self, duration: ShiftDuration, hourly_wage: int) -> PayBreakdown:
        raise NotImplementedError
