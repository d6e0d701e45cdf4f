from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import try_parse_iso_date
from ..core.exceptions import ConfigurationError
from .korea import KOREAN_PUBLIC_HOLIDAYS

logger = logging.getLogger(__name__)


class HolidayCalendar:
    """Set of holiday dates, grouped by year.

    Lookups are exact YYYY-MM-DD matches; weekends are not holidays unless
    they are listed.
    """

    def __init__(self, dates: Iterable[date | str] = ()):
        by_year: dict[int, set[date]] = {}
        for value in dates:
            d = try_parse_iso_date(value)
            if d is None:
                raise ConfigurationError(f"Invalid holiday date: {value!r}")
            by_year.setdefault(d.year, set()).add(d)
        self._by_year = {year: frozenset(days) for year, days in by_year.items()}

    @classmethod
    def from_mapping(cls, table: Mapping[int | str, Iterable[date | str]]) -> "HolidayCalendar":
        dates: list[date | str] = []
        for year, days in table.items():
            for value in days:
                d = try_parse_iso_date(value)
                if d is None or str(d.year) != str(year):
                    raise ConfigurationError(f"Holiday {value!r} does not belong to year {year}")
                dates.append(d)
        return cls(dates)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "HolidayCalendar":
        """Load `{"2025": ["2025-01-01", ...], ...}` from disk."""
        path = Path(path)
        try:
            table = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read holiday calendar {path}: {e}") from e
        if not isinstance(table, dict):
            raise ConfigurationError(f"Holiday calendar {path} must map years to date lists")

        calendar = cls.from_mapping(table)
        logger.info("Loaded holiday calendar %s (years=%s)", path, calendar.years)
        return calendar

    @property
    def years(self) -> list[int]:
        return sorted(self._by_year)

    def for_year(self, year: int) -> list[date]:
        return sorted(self._by_year.get(year, ()))

    def is_holiday(self, value: object) -> bool:
        d = try_parse_iso_date(value)
        if d is None:
            return False
        return d in self._by_year.get(d.year, ())

    def __contains__(self, value: object) -> bool:
        return self.is_holiday(value)

    def __len__(self) -> int:
        return sum(len(days) for days in self._by_year.values())


DEFAULT_CALENDAR = HolidayCalendar.from_mapping(KOREAN_PUBLIC_HOLIDAYS)


def is_holiday(date_string: object, calendar: Optional[HolidayCalendar] = None) -> bool:
    """True when `date_string` is a listed holiday. Never raises."""
    if calendar is None:
        calendar = DEFAULT_CALENDAR
    return calendar.is_holiday(date_string)
