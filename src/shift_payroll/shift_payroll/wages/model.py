from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WageSetting:
    """Domain entity: one wage revision, effective from `effective_from` until superseded.

    Amounts are integer JPY; `transportation` is a flat per-day allowance.
    """

    wage_id: int
    employee_id: int
    hourly_wage: int
    transportation: int
    effective_from: datetime

    def __post_init__(self) -> None:
        for field_name in ("hourly_wage", "transportation"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{field_name} must be an integer amount of yen")
            if value < 0:
                raise ValidationError(f"{field_name} must not be negative")
        if not isinstance(self.effective_from, datetime):
            raise ValidationError("effective_from must be a timestamp")
