from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..common.datetime_utils import try_parse_iso_date
from ..core.exceptions import ValidationError
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class JsonAttendanceRepository:
    """Attendance records read from a JSON export.

    The file holds either a list of rows or an object with a `records` list.
    Rows are loaded once and kept in file order.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._records: list[AttendanceRecord] | None = None

    def _load(self) -> list[AttendanceRecord]:
        if self._records is not None:
            return self._records

        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ValidationError(f"Attendance file not found: {self._path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ValidationError(f"Cannot read attendance file {self._path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ValidationError(f"Attendance file is not valid JSON: {self._path} ({e})") from e

        rows = payload.get("records") if isinstance(payload, dict) else payload
        if not isinstance(rows, list):
            raise ValidationError(f"Attendance file must contain a list of records: {self._path}")

        records = []
        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                raise ValidationError(f"Record #{index} is not an object")
            records.append(AttendanceRecord.from_dict(row))

        logger.info("Loaded %d attendance records from %s", len(records), self._path)
        self._records = records
        return records

    def all(self) -> Sequence[AttendanceRecord]:
        return list(self._load())

    def get_records(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[str] = None,
        site_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        out = []
        for r in self._load():
            if user_id is not None and r.user_id != user_id:
                continue
            if site_id is not None and r.site_id != site_id:
                continue
            work_date = try_parse_iso_date(r.date)
            if work_date is None or not (start_date <= work_date <= end_date):
                continue
            out.append(r)
        return out
