from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_non_empty
from ..core.enums import WorkType


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công theo 공수.

    `labor_hours` is stored as received; calculations normalize it.
    """

    id: str
    user_id: Optional[str]
    site_id: Optional[str]
    date: str
    labor_hours: Any
    work_type: str = WorkType.REGULAR.value
    notes: Optional[str] = None
    weather_condition: Optional[str] = None
    created_at: Optional[str] = None
    site_name: Optional[str] = None

    @property
    def is_holiday_work_type(self) -> bool:
        return self.work_type == WorkType.HOLIDAY.value

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "AttendanceRecord":
        """Build a record from a database/JSON row.

        `work_date` is accepted as an alias of `date`.
        """
        record_id = require_non_empty(str(row.get("id") or ""), "id")
        work_date = row.get("date") or row.get("work_date") or ""
        return cls(
            id=record_id,
            user_id=row.get("user_id"),
            site_id=row.get("site_id"),
            date=str(work_date),
            labor_hours=row.get("labor_hours"),
            work_type=str(row.get("work_type") or WorkType.REGULAR.value),
            notes=row.get("notes"),
            weather_condition=row.get("weather_condition"),
            created_at=row.get("created_at"),
            site_name=row.get("site_name"),
        )
