"""Export monthly report rows (CSV for spreadsheets, Excel for payroll staff)."""
from __future__ import annotations

import io
from pathlib import Path

import pandas as pd

from .service import REPORT_COLUMNS, ReportData

# Column headers as they appear in the exported sheet
COLUMN_LABELS = {
    "work_date": "날짜",
    "user_id": "작업자",
    "site_id": "현장 ID",
    "site_name": "현장",
    "labor_hours": "공수",
    "labor_hours_display": "공수 표시",
    "actual_hours": "실근무시간",
    "overtime_hours": "연장근무시간",
    "type": "구분",
    "color": "색상",
    "is_holiday": "공휴일",
    "work_type": "작업유형",
    "weather_condition": "날씨",
    "notes": "비고",
}


def report_to_dataframe(report: ReportData, *, labels: bool = False) -> pd.DataFrame:
    df = pd.DataFrame(report.rows, columns=REPORT_COLUMNS)
    if labels:
        df = df.rename(columns=COLUMN_LABELS)
    return df


def write_report_csv(report: ReportData, path: str | Path | None = None) -> bytes:
    """CSV with BOM so Excel opens Korean text correctly."""
    out = io.StringIO()
    report_to_dataframe(report).to_csv(out, index=False)
    csv_bytes = out.getvalue().encode("utf-8-sig")
    if path is not None:
        Path(path).write_bytes(csv_bytes)
    return csv_bytes


def write_report_excel(report: ReportData, path: str | Path | None = None) -> bytes:
    """Two sheets: per-day rows and the monthly summary."""
    summary = {k: v for k, v in report.summary.items() if k != "sites"}
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        report_to_dataframe(report, labels=True).to_excel(writer, sheet_name="attendance", index=False)
        pd.DataFrame([summary]).to_excel(writer, sheet_name="summary", index=False)
    data = out.getvalue()
    if path is not None:
        Path(path).write_bytes(data)
    return data
