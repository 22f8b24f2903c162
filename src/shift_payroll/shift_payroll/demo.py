"""Demo data for local development (enabled with SEED_DEMO_DATA=1)."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from .common.datetime_utils import now_local
from .container import Container

logger = logging.getLogger(__name__)


def seed_demo_data(container: Container, *, now: Optional[datetime] = None) -> int:
    """Register one demo employee with a wage revision and a month of shifts.

    Returns the employee_id.
    """
    now = now or now_local()
    today = now.date()

    employee_id = container.employee_service.register(
        name="Demo Employee",
        email="demo@example.com",
        hourly_wage=1100,
        transportation=500,
        now=now - timedelta(days=60),
    )
    container.wage_service.revise(
        employee_id=employee_id,
        hourly_wage=1200,
        transportation=500,
        effective_date=today - timedelta(days=14),
        now=now,
    )

    for offset in range(28, 0, -2):
        day: date = today - timedelta(days=offset)
        if offset % 4 == 0:
            start, end, break_minutes = "22:00", "06:00", 60
        else:
            start, end, break_minutes = "09:00", "17:30", 45
        container.shift_service.add(
            employee_id=employee_id,
            work_date=day.isoformat(),
            start=start,
            end=end,
            break_minutes=break_minutes,
        )

    logger.info("Seeded demo employee %s", employee_id)
    return employee_id
