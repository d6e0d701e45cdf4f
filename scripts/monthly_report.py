"""Monthly 공수 report and payroll for one worker.

Usage:
    python scripts/monthly_report.py 2025-08 --user user-1 [--data records.json] [--csv out.csv] [--excel out.xlsx]

Settings come from `config` (APP_ENV, .env).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.site_attendance.site_attendance.core.exceptions import DomainError
from src.site_attendance.site_attendance.main import create_container
from src.site_attendance.site_attendance.reports.export import write_report_csv, write_report_excel


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Monthly labor-hours report")
    parser.add_argument("month", help="YYYY-MM")
    parser.add_argument("--user", dest="user_id", default=None)
    parser.add_argument("--site", dest="site_id", default=None)
    parser.add_argument("--data", dest="data_path", default=None, help="attendance JSON export")
    parser.add_argument("--csv", dest="csv_path", default=None)
    parser.add_argument("--excel", dest="excel_path", default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        container = create_container(data_path=args.data_path)
        report = container.report_service.build_monthly_report(
            month=args.month, user_id=args.user_id, site_id=args.site_id
        )
        payroll = None
        if args.user_id:
            payroll = container.payroll_service.monthly_payroll(user_id=args.user_id, month=args.month)
    except DomainError as e:
        raise SystemExit(f"ERROR: {e}")

    for row in report.rows:
        print(f"{row['work_date']}  {row['site_name']:<12} {row['labor_hours_display']:>8}  {row['color']}")

    s = report.summary
    print(
        f"OK: {s['month']} work_days={s['work_days']} absent_days={s['absent_days']} "
        f"holiday_days={s['holiday_days']} total={s['total_labor_hours']} avg={s['average_labor_hours']}"
    )
    if s["duplicate_entries"]:
        print(f"WARN: {s['duplicate_entries']} duplicate entries were summed")
    if payroll is not None:
        print(
            f"Payroll: regular={payroll.regular_hours}h overtime={payroll.overtime_hours}h "
            f"total_pay={payroll.total_pay:,.0f}"
        )

    if args.csv_path:
        write_report_csv(report, args.csv_path)
        print(f"OK: CSV written: {args.csv_path}")
    if args.excel_path:
        write_report_excel(report, args.excel_path)
        print(f"OK: Excel written: {args.excel_path}")


if __name__ == "__main__":
    main()
