from src.shift_payroll.shift_payroll.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.shift_payroll.shift_payroll.shifts.model import ShiftDuration


def test_shift_pay_applies_full_night_rate():
    duration = ShiftDuration(total_minutes=480, normal_minutes=60, night_minutes=420)

    calc = StandardPayrollCalculator()
    assert calc.shift_pay(duration, 1200) == 11700


def test_period_breakdown_splits_base_and_surcharge():
    duration = ShiftDuration(total_minutes=480, normal_minutes=60, night_minutes=420)

    breakdown = StandardPayrollCalculator().period_breakdown(duration, 1200)

    assert breakdown.base_pay == 9600
    assert breakdown.night_allowance == 2100
    assert breakdown.pay == 11700


def test_rounding_paths_floor_differently():
    duration = ShiftDuration(total_minutes=10, normal_minutes=0, night_minutes=10)
    calc = StandardPayrollCalculator()

    breakdown = calc.period_breakdown(duration, 1001)

    # 166.83 + 41.71: parts are floored on their own, the shift pay once.
    assert breakdown.base_pay == 166
    assert breakdown.night_allowance == 41
    assert breakdown.pay == 208
    assert calc.shift_pay(duration, 1001) == 208


def test_zero_wage_pays_nothing():
    duration = ShiftDuration(total_minutes=120, normal_minutes=60, night_minutes=60)

    assert StandardPayrollCalculator().shift_pay(duration, 0) == 0
