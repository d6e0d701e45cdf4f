from __future__ import annotations

import pytest

from src.site_attendance.site_attendance.attendance.model import AttendanceRecord


def make_record(record_id: str, work_date: str, labor_hours, work_type: str = "regular", **kwargs) -> AttendanceRecord:
    return AttendanceRecord(
        id=record_id,
        user_id=kwargs.pop("user_id", "user-1"),
        site_id=kwargs.pop("site_id", "site-1"),
        date=work_date,
        labor_hours=labor_hours,
        work_type=work_type,
        **kwargs,
    )


@pytest.fixture
def august_records() -> list[AttendanceRecord]:
    return [
        make_record("att-1", "2025-08-01", 1.0, weather_condition="clear", notes="Regular work day"),
        make_record("att-2", "2025-08-02", 0.5, weather_condition="rainy", notes="Half day due to rain"),
        make_record("att-3", "2025-08-03", 1.25, "overtime", weather_condition="clear", notes="Overtime work"),
        make_record("att-4", "2025-08-04", 0.0, "holiday", notes="Sunday rest"),
        make_record("att-5", "2025-08-15", 0.0, "holiday", notes="National holiday"),
    ]


class FakeAttendanceSource:
    def __init__(self, records):
        self._records = list(records)
        self.last_args = None

    def get_records(self, *, start_date, end_date, user_id=None, site_id=None):
        self.last_args = {
            "start_date": start_date,
            "end_date": end_date,
            "user_id": user_id,
            "site_id": site_id,
        }
        return [r for r in self._records if user_id is None or r.user_id == user_id]


@pytest.fixture
def fake_source(august_records) -> FakeAttendanceSource:
    return FakeAttendanceSource(august_records)
