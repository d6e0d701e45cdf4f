"""Example: use the calculation and service layers directly (no web layer)."""

from src.site_attendance.site_attendance.labor_hours.calculator import calculate_monthly_totals, format_labor_hours
from src.site_attendance.site_attendance.main import create_container


def main():
    container = create_container(data_path="data/attendance.json")
    records = container.attendance_repo.all()

    totals = calculate_monthly_totals(records, "2025-08", calendar=container.calendar)
    print(format_labor_hours(totals.total_labor_hours), totals.to_dict())
    print(container.payroll_service.monthly_payroll(user_id="user-1", month="2025-08"))


if __name__ == "__main__":
    main()
