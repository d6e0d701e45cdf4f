from __future__ import annotations

from src.site_attendance.site_attendance.reports.service import MonthlyReportService, summarize_by_site

from conftest import FakeAttendanceSource, make_record


def test_report_rows_and_summary(fake_source):
    svc = MonthlyReportService(fake_source)

    report = svc.build_monthly_report(month="2025-08", user_id="user-1")

    assert [r["work_date"] for r in report.rows] == [
        "2025-08-01",
        "2025-08-02",
        "2025-08-03",
        "2025-08-04",
        "2025-08-15",
    ]
    first = report.rows[0]
    assert first["labor_hours_display"] == "1.0공수"
    assert first["actual_hours"] == 8
    assert first["color"] == "green"
    assert first["type"] == "regular"
    assert first["is_holiday"] is False
    assert report.rows[-1]["is_holiday"] is True

    assert report.summary["total_labor_hours"] == 2.75
    assert report.summary["holiday_days"] == 2
    assert "records" not in report.summary
    assert report.summary["sites"]["unique_sites"] == 1


def test_report_forwards_filters(fake_source):
    MonthlyReportService(fake_source).build_monthly_report(month="2025-02", user_id="user-1", site_id="site-9")

    assert fake_source.last_args["end_date"].day == 28
    assert fake_source.last_args["site_id"] == "site-9"


def test_report_invalid_month(fake_source):
    report = MonthlyReportService(fake_source).build_monthly_report(month="2025-13")

    assert report.rows == []
    assert report.summary["work_days"] == 0
    assert fake_source.last_args is None


def test_report_rows_sorted_by_date():
    source = FakeAttendanceSource(
        [make_record("b", "2025-08-09", 1.0), make_record("a", "2025-08-02", 0.5)]
    )

    report = MonthlyReportService(source).build_monthly_report(month="2025-08")

    assert [r["work_date"] for r in report.rows] == ["2025-08-02", "2025-08-09"]


def test_summarize_by_site():
    records = [
        make_record("1", "2025-08-01", 1.0, site_id="site-1", site_name="A"),
        make_record("2", "2025-08-02", 0.5, site_id="site-2", site_name="B"),
        make_record("3", "2025-08-03", 1.0, site_id="site-2", site_name="B"),
        make_record("4", "2025-08-04", 0.0, site_id="site-3", site_name="C"),
    ]

    result = summarize_by_site(records)

    assert result["unique_sites"] == 2
    assert [s["site_id"] for s in result["sites"]] == ["site-2", "site-1", "site-3"]
    assert result["sites"][0] == {"site_id": "site-2", "site_name": "B", "work_days": 2, "total_labor_hours": 1.5}


def test_summarize_by_site_empty():
    assert summarize_by_site(None) == {"unique_sites": 0, "sites": []}


def test_report_month_with_trailing_newline(fake_source):
    report = MonthlyReportService(fake_source).build_monthly_report(month="2025-08\n")

    assert report.rows == []
    assert fake_source.last_args is None
