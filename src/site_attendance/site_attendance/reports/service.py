from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..attendance.repository import AttendanceRecordSource
from ..common.datetime_utils import is_valid_month, month_bounds
from ..holidays.calendar import HolidayCalendar, is_holiday
from ..labor_hours.calculator import (
    calculate_labor_hours,
    calculate_monthly_totals,
    format_labor_hours,
    get_attendance_color,
    iter_records,
)

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "work_date",
    "user_id",
    "site_id",
    "site_name",
    "labor_hours",
    "labor_hours_display",
    "actual_hours",
    "overtime_hours",
    "type",
    "color",
    "is_holiday",
    "work_type",
    "weather_condition",
    "notes",
]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


def summarize_by_site(records: Optional[Iterable[Any]]) -> dict:
    """Per-site work days and 공수 totals.

    Only records with labor hours > 0 count as worked.
    """
    sites: dict[str, dict] = {}
    for r in iter_records(records):
        calc = calculate_labor_hours(r.labor_hours)
        key = r.site_id or "-"
        s = sites.get(key)
        if not s:
            s = {
                "site_id": r.site_id,
                "site_name": r.site_name or "-",
                "work_days": 0,
                "total_labor_hours": 0.0,
            }
            sites[key] = s
        s["total_labor_hours"] += calc.labor_hours
        if calc.labor_hours > 0:
            s["work_days"] += 1

    worked = [s for s in sites.values() if s["work_days"] > 0]
    return {
        "unique_sites": len(worked),
        "sites": sorted(sites.values(), key=lambda x: x["total_labor_hours"], reverse=True),
    }


class MonthlyReportService:
    def __init__(self, attendance: AttendanceRecordSource, *, calendar: Optional[HolidayCalendar] = None):
        self._attendance = attendance
        self._calendar = calendar

    def build_monthly_report(
        self,
        *,
        month: str,
        user_id: Optional[str] = None,
        site_id: Optional[str] = None,
    ) -> ReportData:
        if not is_valid_month(month):
            logger.info("Report requested for invalid month %r", month)
            totals = calculate_monthly_totals([], month, calendar=self._calendar)
            return ReportData(rows=[], summary=totals.to_dict())

        start, end = month_bounds(month)
        records = self._attendance.get_records(start_date=start, end_date=end, user_id=user_id, site_id=site_id)
        totals = calculate_monthly_totals(records, month, calendar=self._calendar)

        out_rows: list[dict] = []
        for r in totals.records:
            calc = calculate_labor_hours(r.labor_hours)
            out_rows.append(
                {
                    "work_date": r.date,
                    "user_id": r.user_id,
                    "site_id": r.site_id,
                    "site_name": r.site_name or "-",
                    "labor_hours": calc.labor_hours,
                    "labor_hours_display": format_labor_hours(calc.labor_hours),
                    "actual_hours": calc.actual_hours,
                    "overtime_hours": calc.overtime_hours,
                    "type": calc.type.value,
                    "color": get_attendance_color(calc.labor_hours).value,
                    "is_holiday": is_holiday(r.date, self._calendar) or r.is_holiday_work_type,
                    "work_type": r.work_type,
                    "weather_condition": r.weather_condition or "",
                    "notes": r.notes or "",
                }
            )

        out_rows.sort(key=lambda x: x["work_date"])
        summary = totals.to_dict()
        summary["sites"] = summarize_by_site(totals.records)
        if totals.duplicate_entries:
            logger.info("Month %s has %d duplicate attendance entries", month, totals.duplicate_entries)
        return ReportData(rows=out_rows, summary=summary)
