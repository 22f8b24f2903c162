"""Payroll constants.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

# Pay periods close on the 25th; the 26th opens the next month's period.
CLOSING_DAY = 25

# Night window is [22:00, 05:00) wall-clock time.
NIGHT_START_HOUR = 22
NIGHT_END_HOUR = 5

# Single-shift pay applies the full night rate, period aggregation only the surcharge.
NIGHT_RATE_MULTIPLIER = 1.25
NIGHT_SURCHARGE_RATE = 0.25

# Annual gross-income threshold for dependent status (JPY).
ANNUAL_INCOME_THRESHOLD = 1_030_000

# Date-only wage revisions take effect at the very end of their day.
WAGE_REVISION_TIME = time(23, 59, 59, 999000)
