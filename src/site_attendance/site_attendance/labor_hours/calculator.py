"""Labor-hours (공수) calculations.

1.0 공수 is one standard 8-hour workday. Every function here is pure and
total: malformed input is normalized (0, empty list, False) instead of
raising.
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Iterator, Mapping, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import is_valid_month, month_key, try_parse_iso_date
from ..common.validators import normalize_labor_hours
from ..core.constants import (
    AVERAGE_DECIMAL_PLACES,
    DISPLAY_DECIMAL_PLACES,
    FULL_DAY_LABOR_HOURS,
    HALF_DAY_LABOR_HOURS,
    LABOR_HOURS_UNIT,
    STANDARD_WORKDAY_HOURS,
)
from ..core.enums import AttendanceColor, LaborHoursType
from ..core.exceptions import ValidationError
from ..holidays.calendar import HolidayCalendar, is_holiday
from .model import LaborHoursCalculation, MonthlyTotals

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int) -> float:
    """Decimal rounding, so 1.25 -> 1.3 rather than float's 1.2."""
    quantum = Decimal(1).scaleb(-places)
    try:
        return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return round(value, places)


def calculate_overtime_hours(actual_hours: float) -> float:
    return max(0, actual_hours - STANDARD_WORKDAY_HOURS)


def _classify(labor_hours: float) -> LaborHoursType:
    if labor_hours == 0:
        return LaborHoursType.ABSENT
    if labor_hours < FULL_DAY_LABOR_HOURS:
        return LaborHoursType.PARTIAL
    if labor_hours == FULL_DAY_LABOR_HOURS:
        return LaborHoursType.REGULAR
    return LaborHoursType.OVERTIME


def calculate_labor_hours(labor_hours: Any) -> LaborHoursCalculation:
    """Convert 공수 into actual and overtime hours.

    No upper bound is applied: 3.0 yields 24 actual hours.
    """
    normalized = normalize_labor_hours(labor_hours)
    actual_hours = normalized.value * STANDARD_WORKDAY_HOURS
    return LaborHoursCalculation(
        labor_hours=normalized.value,
        actual_hours=actual_hours,
        overtime_hours=calculate_overtime_hours(actual_hours),
        type=_classify(normalized.value),
        was_clamped=normalized.was_clamped,
    )


def format_labor_hours(labor_hours: Any) -> str:
    value = normalize_labor_hours(labor_hours).value
    quantum = Decimal(1).scaleb(-DISPLAY_DECIMAL_PLACES)
    try:
        text = str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        text = f"{value:.{DISPLAY_DECIMAL_PLACES}f}"
    return f"{text}{LABOR_HOURS_UNIT}"


def get_attendance_color(labor_hours: Any) -> AttendanceColor:
    value = normalize_labor_hours(labor_hours).value
    if value == 0:
        return AttendanceColor.GRAY
    if value < HALF_DAY_LABOR_HOURS:
        return AttendanceColor.ORANGE
    if value < FULL_DAY_LABOR_HOURS:
        return AttendanceColor.YELLOW
    return AttendanceColor.GREEN


def iter_records(records: Optional[Iterable[Any]]) -> Iterator[AttendanceRecord]:
    """Yield AttendanceRecord items; row mappings are converted, junk skipped."""
    if not records:
        return
    for item in records:
        if isinstance(item, AttendanceRecord):
            yield item
        elif isinstance(item, Mapping):
            try:
                yield AttendanceRecord.from_dict(item)
            except ValidationError as e:
                logger.debug("Skipping attendance row: %s", e)
        else:
            logger.debug("Skipping non-record item %r", item)


def get_labor_hours_by_date_range(
    records: Optional[Iterable[Any]],
    start_date: str,
    end_date: str,
) -> list[AttendanceRecord]:
    """Records dated within [start_date, end_date], input order kept.

    An inverted range gives an empty list; the bounds are not swapped.
    """
    start = try_parse_iso_date(start_date)
    end = try_parse_iso_date(end_date)
    if start is None or end is None or end < start:
        return []

    out = []
    for r in iter_records(records):
        work_date = try_parse_iso_date(r.date)
        if work_date is None:
            logger.debug("Dropping record %s with invalid date %r", r.id, r.date)
            continue
        if start <= work_date <= end:
            out.append(r)
    return out


def filter_month(records: Optional[Iterable[Any]], month: str) -> list[AttendanceRecord]:
    if not is_valid_month(month):
        return []
    out = []
    for r in iter_records(records):
        work_date = try_parse_iso_date(r.date)
        if work_date is None:
            logger.debug("Dropping record %s with invalid date %r", r.id, r.date)
            continue
        if month_key(work_date) == month:
            out.append(r)
    return out


def calculate_monthly_totals(
    records: Optional[Iterable[Any]],
    month: str,
    *,
    calendar: Optional[HolidayCalendar] = None,
) -> MonthlyTotals:
    """Aggregate one YYYY-MM month of attendance.

    Records sharing a date are summed, not deduplicated; `duplicate_entries`
    counts them so callers can spot double entry.
    """
    month_records = filter_month(records, month)

    total_labor = 0.0
    total_actual = 0.0
    total_overtime = 0.0
    work_days = absent_days = holiday_days = 0
    duplicates = clamped = 0
    seen: set[tuple[Optional[str], str]] = set()

    for r in month_records:
        calc = calculate_labor_hours(r.labor_hours)
        total_labor += calc.labor_hours
        total_actual += calc.actual_hours
        total_overtime += calc.overtime_hours

        if calc.labor_hours > 0:
            work_days += 1
        else:
            absent_days += 1

        if is_holiday(r.date, calendar) or r.is_holiday_work_type:
            holiday_days += 1

        if calc.was_clamped:
            clamped += 1

        key = (r.user_id, r.date)
        if key in seen:
            duplicates += 1
        seen.add(key)

    average = round_half_up(total_labor / work_days, AVERAGE_DECIMAL_PLACES) if work_days else 0

    return MonthlyTotals(
        month=month,
        total_labor_hours=total_labor,
        total_actual_hours=total_actual,
        total_overtime_hours=total_overtime,
        work_days=work_days,
        absent_days=absent_days,
        holiday_days=holiday_days,
        average_labor_hours=average,
        records=month_records,
        duplicate_entries=duplicates,
        clamped_records=clamped,
    )
