from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.json_attendance_repository import JsonAttendanceRepository
from .core.constants import DEFAULT_HOURLY_RATE, DEFAULT_OVERTIME_MULTIPLIER
from .core.exceptions import ConfigurationError
from .holidays.calendar import DEFAULT_CALENDAR, HolidayCalendar
from .payroll.model import PayrollRates
from .payroll.service import PayrollService
from .reports.service import MonthlyReportService


@dataclass(frozen=True)
class Container:
    calendar: HolidayCalendar
    attendance_repo: JsonAttendanceRepository
    rates: PayrollRates

    payroll_service: PayrollService
    report_service: MonthlyReportService


def build_calendar(path: str | None) -> HolidayCalendar:
    if not path:
        return DEFAULT_CALENDAR
    return HolidayCalendar.from_json_file(path)


def build_container(*, settings: Any, data_path: str | None = None) -> Container:
    """Wire services from a settings module (see `config`)."""
    data_path = data_path or getattr(settings, "ATTENDANCE_DATA_PATH", None)
    if not data_path:
        raise ConfigurationError("ATTENDANCE_DATA_PATH is not set")

    try:
        hourly_rate = float(getattr(settings, "HOURLY_RATE", DEFAULT_HOURLY_RATE))
        multiplier = float(getattr(settings, "OVERTIME_MULTIPLIER", DEFAULT_OVERTIME_MULTIPLIER))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid pay rate settings: {e}") from e

    calendar = build_calendar(getattr(settings, "HOLIDAY_CALENDAR_PATH", None))
    attendance_repo = JsonAttendanceRepository(data_path)
    rates = PayrollRates.from_multiplier(hourly_rate, multiplier)

    payroll_service = PayrollService(attendance_repo, rates=rates)
    report_service = MonthlyReportService(attendance_repo, calendar=calendar)

    return Container(
        calendar=calendar,
        attendance_repo=attendance_repo,
        rates=rates,
        payroll_service=payroll_service,
        report_service=report_service,
    )
