from __future__ import annotations

from enum import Enum


class WorkType(str, Enum):
    """Loại công việc ghi trên bản ghi chấm công (chỉ mang tính thông tin)."""

    REGULAR = "regular"
    OVERTIME = "overtime"
    HOLIDAY = "holiday"
    WEATHER_DELAY = "weather_delay"
    WEATHER_CANCELLATION = "weather_cancellation"


class LaborHoursType(str, Enum):
    """Classification of a single day's labor hours."""

    ABSENT = "absent"
    PARTIAL = "partial"
    REGULAR = "regular"
    OVERTIME = "overtime"


class AttendanceColor(str, Enum):
    """Calendar color bands, ordered by intensity."""

    GRAY = "gray"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
