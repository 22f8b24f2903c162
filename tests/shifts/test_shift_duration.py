from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.shift_payroll.shift_payroll.shifts.duration import compute_shift_duration, count_night_minutes


def _sweep_night_minutes(start: datetime, end: datetime) -> int:
    night = 0
    current = start
    while current < end:
        if current.hour >= 22 or current.hour < 5:
            night += 1
        current += timedelta(minutes=1)
    return night


def test_overnight_example_splits_night_and_normal():
    d = compute_shift_duration(datetime(2025, 1, 24, 22, 0), datetime(2025, 1, 25, 6, 0), 0)

    assert d.total_minutes == 480
    assert d.night_minutes == 420
    assert d.normal_minutes == 60


def test_crossing_midnight_counts_both_sides():
    d = compute_shift_duration(datetime(2025, 3, 1, 23, 0), datetime(2025, 3, 2, 2, 0), 0)

    assert d.night_minutes == 180
    assert d.total_minutes == 180
    assert d.normal_minutes == 0


def test_break_is_taken_from_total_and_night_is_capped():
    d = compute_shift_duration(datetime(2025, 3, 1, 23, 0), datetime(2025, 3, 2, 2, 0), 30)

    assert d.total_minutes == 150
    assert d.night_minutes == 150
    assert d.normal_minutes == 0


def test_daytime_shift_has_no_night_minutes():
    d = compute_shift_duration(datetime(2025, 3, 3, 5, 0), datetime(2025, 3, 3, 22, 0), 60)

    assert d.night_minutes == 0
    assert d.total_minutes == 17 * 60 - 60
    assert d.normal_minutes == d.total_minutes


@pytest.mark.parametrize("break_minutes", [480, 500])
def test_break_longer_than_shift_clamps_to_zero(break_minutes):
    d = compute_shift_duration(datetime(2025, 1, 24, 22, 0), datetime(2025, 1, 25, 6, 0), break_minutes)

    assert d.total_minutes == 0
    assert d.night_minutes == 0
    assert d.normal_minutes == 0


def test_end_before_start_clamps_instead_of_raising():
    d = compute_shift_duration(datetime(2025, 1, 25, 6, 0), datetime(2025, 1, 24, 22, 0), 0)

    assert (d.total_minutes, d.normal_minutes, d.night_minutes) == (0, 0, 0)


def test_evening_boundary_minute():
    d = compute_shift_duration(datetime(2025, 1, 1, 21, 59), datetime(2025, 1, 1, 22, 1), 0)

    assert d.total_minutes == 2
    assert d.night_minutes == 1


def test_morning_boundary_minute():
    d = compute_shift_duration(datetime(2025, 1, 1, 4, 59), datetime(2025, 1, 1, 5, 1), 0)

    assert d.total_minutes == 2
    assert d.night_minutes == 1


def test_partial_minute_never_exceeds_total():
    # The started minute at 22:00 is night, but less than a whole minute elapsed.
    assert count_night_minutes(datetime(2025, 1, 1, 22, 0), datetime(2025, 1, 1, 22, 0, 30)) == 1

    d = compute_shift_duration(datetime(2025, 1, 1, 22, 0), datetime(2025, 1, 1, 22, 0, 30), 0)
    assert d.total_minutes == 0
    assert d.night_minutes == 0


def test_multi_day_span_accrues_every_night():
    d = compute_shift_duration(datetime(2025, 1, 1, 20, 0), datetime(2025, 1, 3, 8, 0), 0)

    assert d.total_minutes == 36 * 60
    assert d.night_minutes == 2 * 420


def test_matches_minute_sweep_and_parts_add_up():
    base = datetime(2025, 6, 1, 0, 0)
    for offset in range(0, 24 * 60, 37):
        start = base + timedelta(minutes=offset, seconds=offset % 3 * 20)
        for length in (1, 59, 61, 300, 419, 421, 1439, 1500):
            end = start + timedelta(minutes=length)
            assert count_night_minutes(start, end) == _sweep_night_minutes(start, end)

            d = compute_shift_duration(start, end, 45)
            assert d.normal_minutes + d.night_minutes == d.total_minutes
            assert d.normal_minutes >= 0
            assert d.night_minutes >= 0
