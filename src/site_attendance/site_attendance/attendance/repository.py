from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRecordSource(Protocol):
    """Anything that can hand over attendance records for a period."""

    def get_records(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[str] = None,
        site_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
