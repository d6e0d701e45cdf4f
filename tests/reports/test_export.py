from __future__ import annotations

import io

import pandas as pd

from src.site_attendance.site_attendance.reports.export import (
    report_to_dataframe,
    write_report_csv,
    write_report_excel,
)
from src.site_attendance.site_attendance.reports.service import REPORT_COLUMNS, MonthlyReportService


def _report(fake_source):
    return MonthlyReportService(fake_source).build_monthly_report(month="2025-08", user_id="user-1")


def test_dataframe_columns(fake_source):
    df = report_to_dataframe(_report(fake_source))

    assert list(df.columns) == REPORT_COLUMNS
    assert len(df) == 5
    assert df["actual_hours"].sum() == 22


def test_dataframe_labels(fake_source):
    df = report_to_dataframe(_report(fake_source), labels=True)

    assert "공수" in df.columns
    assert "날짜" in df.columns


def test_csv_has_bom_and_rows(fake_source, tmp_path):
    path = tmp_path / "report.csv"

    data = write_report_csv(_report(fake_source), path)

    assert data.startswith(b"\xef\xbb\xbf")
    assert path.read_bytes() == data
    df = pd.read_csv(io.BytesIO(data), encoding="utf-8-sig")
    assert df["labor_hours_display"].tolist()[2] == "1.3공수"


def test_excel_has_rows_and_summary(fake_source, tmp_path):
    path = tmp_path / "report.xlsx"

    write_report_excel(_report(fake_source), path)

    sheets = pd.read_excel(path, sheet_name=None)
    assert set(sheets) == {"attendance", "summary"}
    assert len(sheets["attendance"]) == 5
    assert sheets["summary"]["work_days"].iloc[0] == 3
