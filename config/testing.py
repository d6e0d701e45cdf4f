DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

HOLIDAY_CALENDAR_PATH = ""
ATTENDANCE_DATA_PATH = ""

HOURLY_RATE = 15000.0
OVERTIME_MULTIPLIER = 1.5
