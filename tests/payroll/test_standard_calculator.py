from src.site_attendance.site_attendance.labor_hours.calculator import calculate_labor_hours
from src.site_attendance.site_attendance.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_standard_calculator_caps_regular_hours():
    calc = StandardPayrollCalculator()

    split = calc.split_hours(calculate_labor_hours(1.25))

    assert split.regular_hours == 8
    assert split.overtime_hours == 2


def test_standard_calculator_partial_day():
    split = StandardPayrollCalculator().split_hours(calculate_labor_hours(0.5))

    assert split.regular_hours == 4
    assert split.overtime_hours == 0
