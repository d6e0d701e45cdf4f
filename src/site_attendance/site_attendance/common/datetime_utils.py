from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Optional

_MONTH_RE = re.compile(r"\d{4}-(0[1-9]|1[0-2])")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: object) -> Optional[date]:
    """Like `parse_iso_date` but returns None for anything unparseable.

    Only the exact YYYY-MM-DD shape is accepted. Timestamps such as
    "2025-08-01T09:00:00Z" are rejected on purpose, so records carrying one
    are dropped from date-range and monthly selection rather than matched by
    prefix.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if not isinstance(value, str) or len(value) != 10:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        return None


def is_valid_month(value: object) -> bool:
    """True for a YYYY-MM month key."""
    return isinstance(value, str) and _MONTH_RE.fullmatch(value) is not None


def month_key(value: date) -> str:
    return value.strftime("%Y-%m")


def month_bounds(month: str) -> tuple[date, date]:
    """First and last day of a YYYY-MM month."""
    first = parse_iso_date(f"{month}-01")
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)
