from __future__ import annotations

from dataclasses import asdict, dataclass, field

from ..attendance.model import AttendanceRecord
from ..core.enums import LaborHoursType


@dataclass(frozen=True)
class LaborHoursCalculation:
    """One day's 공수 expressed in hours.

    `was_clamped` is excluded from equality: it only tells the caller that the
    input was malformed and replaced with 0.
    """

    labor_hours: float
    actual_hours: float
    overtime_hours: float
    type: LaborHoursType
    was_clamped: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class MonthlyTotals:
    month: str
    total_labor_hours: float = 0
    total_actual_hours: float = 0
    total_overtime_hours: float = 0
    work_days: int = 0
    absent_days: int = 0
    holiday_days: int = 0
    average_labor_hours: float = 0
    records: list[AttendanceRecord] = field(default_factory=list)
    # diagnostics
    duplicate_entries: int = 0
    clamped_records: int = 0

    def to_dict(self, *, include_records: bool = False) -> dict:
        data = asdict(self)
        if not include_records:
            data.pop("records")
        return data
