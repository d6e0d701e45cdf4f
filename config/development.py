import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

HOLIDAY_CALENDAR_PATH = os.getenv("HOLIDAY_CALENDAR_PATH", "")
ATTENDANCE_DATA_PATH = os.getenv("ATTENDANCE_DATA_PATH", "data/attendance.json")

HOURLY_RATE = float(os.getenv("HOURLY_RATE", "15000"))
OVERTIME_MULTIPLIER = float(os.getenv("OVERTIME_MULTIPLIER", "1.5"))
