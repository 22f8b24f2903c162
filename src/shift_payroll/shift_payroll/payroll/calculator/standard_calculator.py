from __future__ import annotations

import math

from ...core.constants import NIGHT_RATE_MULTIPLIER, NIGHT_SURCHARGE_RATE
from ...shifts.model import ShiftDuration
from .base import PayBreakdown, PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hourly wage per minute worked, night minutes at 1.25x, yen floored."""

    def shift_pay(self, duration: ShiftDuration, hourly_wage: int) -> int:
        normal_pay = (duration.normal_minutes / 60) * hourly_wage
        night_pay = (duration.night_minutes / 60) * (hourly_wage * NIGHT_RATE_MULTIPLIER)
        return math.floor(normal_pay + night_pay)

    def period_breakdown(self, duration: ShiftDuration, hourly_wage: int) -> PayBreakdown:
        # Base covers every paid minute; night minutes add only the 0.25 surcharge on top.
        base = (duration.total_minutes / 60) * hourly_wage
        allowance = (duration.night_minutes / 60) * (hourly_wage * NIGHT_SURCHARGE_RATE)
        return PayBreakdown(
            base_pay=math.floor(base),
            night_allowance=math.floor(allowance),
            pay=math.floor(base + allowance),
        )
