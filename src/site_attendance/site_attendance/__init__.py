"""Site Attendance package.

Labor-hours (공수) arithmetic for construction-site attendance, organized by
feature modules (labor_hours, holidays, payroll, reports, ...) with thin
service layers over plain record sources.
"""
