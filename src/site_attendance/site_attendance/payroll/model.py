from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER


@dataclass(frozen=True)
class PayrollRates:
    """Per-hour pay amounts. `overtime_rate` is absolute, not a multiplier."""

    hourly_rate: float
    overtime_rate: float

    @classmethod
    def from_multiplier(cls, hourly_rate: float, multiplier: float = DEFAULT_OVERTIME_MULTIPLIER) -> "PayrollRates":
        """Build rates from a base hourly amount and an overtime multiplier rule."""
        return cls(hourly_rate=hourly_rate, overtime_rate=hourly_rate * multiplier)


@dataclass(frozen=True)
class PayrollTotals:
    regular_hours: float = 0
    overtime_hours: float = 0
    regular_pay: float = 0
    overtime_pay: float = 0
    total_pay: float = 0
    total_hours: float = 0
    total_labor_hours: float = 0
    work_days: int = 0
    absent_days: int = 0
