from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from config import get_settings_module
from src.site_attendance.site_attendance.container import build_container
from src.site_attendance.site_attendance.core.exceptions import ConfigurationError
from src.site_attendance.site_attendance.holidays.calendar import DEFAULT_CALENDAR


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "attendance.json"
    path.write_text(
        json.dumps(
            [
                {"id": "a", "user_id": "user-1", "date": "2025-08-01", "labor_hours": 1.25},
                {"id": "b", "user_id": "user-1", "date": "2025-08-15", "labor_hours": 0, "work_type": "holiday"},
            ]
        ),
        encoding="utf-8",
    )
    return path


def test_build_container_defaults(data_file):
    settings = SimpleNamespace(ATTENDANCE_DATA_PATH=str(data_file), HOURLY_RATE=10000, OVERTIME_MULTIPLIER=2)

    container = build_container(settings=settings)

    assert container.calendar is DEFAULT_CALENDAR
    assert container.rates.overtime_rate == 20000
    totals = container.payroll_service.monthly_payroll(user_id="user-1", month="2025-08")
    assert totals.regular_pay == 80000
    assert totals.overtime_pay == 40000


def test_build_container_with_holiday_file(tmp_path, data_file):
    holidays = tmp_path / "holidays.json"
    holidays.write_text(json.dumps({"2025": ["2025-08-01"]}), encoding="utf-8")
    settings = SimpleNamespace(HOLIDAY_CALENDAR_PATH=str(holidays))

    container = build_container(settings=settings, data_path=str(data_file))
    report = container.report_service.build_monthly_report(month="2025-08")

    assert report.summary["holiday_days"] == 2


def test_build_container_requires_data_path():
    with pytest.raises(ConfigurationError):
        build_container(settings=SimpleNamespace())


def test_build_container_rejects_bad_rates(data_file):
    settings = SimpleNamespace(ATTENDANCE_DATA_PATH=str(data_file), HOURLY_RATE="lots")

    with pytest.raises(ConfigurationError):
        build_container(settings=settings)


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module
