from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...labor_hours.model import LaborHoursCalculation


@dataclass(frozen=True)
class HoursSplit:
    regular_hours: float
    overtime_hours: float


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def split_hours(self, calculation: LaborHoursCalculation) -> HoursSplit:
        raise NotImplementedError
