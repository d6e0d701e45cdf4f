from __future__ import annotations

from ...core.constants import STANDARD_WORKDAY_HOURS
from ...labor_hours.model import LaborHoursCalculation
from .base import HoursSplit, PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: up to 8 hours a day are regular, the rest is overtime."""

    def split_hours(self, calculation: LaborHoursCalculation) -> HoursSplit:
        regular = min(calculation.actual_hours, STANDARD_WORKDAY_HOURS)
        return HoursSplit(regular_hours=regular, overtime_hours=calculation.overtime_hours)
