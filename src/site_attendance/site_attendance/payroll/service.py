from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..attendance.repository import AttendanceRecordSource
from ..common.datetime_utils import is_valid_month, month_bounds
from ..labor_hours.calculator import calculate_labor_hours, filter_month, iter_records
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRates, PayrollTotals

logger = logging.getLogger(__name__)


def calculate_payroll_totals(
    *,
    attendance_records: Optional[Iterable[Any]],
    hourly_rate: float,
    overtime_rate: float,
    month: Optional[str] = None,
    user_id: Optional[str] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> PayrollTotals:
    """Turn attendance into regular/overtime hours and pay.

    `month` and `user_id` narrow the records when given.
    """
    calculator = calculator or StandardPayrollCalculator()

    records = list(iter_records(attendance_records))
    if month is not None:
        records = filter_month(records, month)
    if user_id is not None:
        records = [r for r in records if r.user_id == user_id]

    regular_hours = 0.0
    overtime_hours = 0.0
    total_labor = 0.0
    work_days = absent_days = 0

    for r in records:
        calc = calculate_labor_hours(r.labor_hours)
        split = calculator.split_hours(calc)
        regular_hours += split.regular_hours
        overtime_hours += split.overtime_hours
        total_labor += calc.labor_hours
        if calc.labor_hours > 0:
            work_days += 1
        else:
            absent_days += 1

    regular_pay = regular_hours * hourly_rate
    overtime_pay = overtime_hours * overtime_rate
    return PayrollTotals(
        regular_hours=regular_hours,
        overtime_hours=overtime_hours,
        regular_pay=regular_pay,
        overtime_pay=overtime_pay,
        total_pay=regular_pay + overtime_pay,
        total_hours=regular_hours + overtime_hours,
        total_labor_hours=total_labor,
        work_days=work_days,
        absent_days=absent_days,
    )


class PayrollService:
    def __init__(
        self,
        attendance: AttendanceRecordSource,
        *,
        rates: PayrollRates,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._rates = rates
        self._calculator = calculator or StandardPayrollCalculator()

    @property
    def rates(self) -> PayrollRates:
        return self._rates

    def monthly_payroll(
        self,
        *,
        user_id: str,
        month: str,
        rates: Optional[PayrollRates] = None,
    ) -> PayrollTotals:
        if not is_valid_month(month):
            logger.info("Payroll requested for invalid month %r", month)
            return PayrollTotals()

        rates = rates or self._rates
        start, end = month_bounds(month)
        records = self._attendance.get_records(start_date=start, end_date=end, user_id=user_id)
        totals = calculate_payroll_totals(
            attendance_records=records,
            hourly_rate=rates.hourly_rate,
            overtime_rate=rates.overtime_rate,
            month=month,
            user_id=user_id,
            calculator=self._calculator,
        )
        logger.info(
            "Payroll user=%s month=%s hours=%s total_pay=%s", user_id, month, totals.total_hours, totals.total_pay
        )
        return totals
