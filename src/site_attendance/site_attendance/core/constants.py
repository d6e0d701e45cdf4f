"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# 1.0 공수 == one standard workday
STANDARD_WORKDAY_HOURS = 8

LABOR_HOURS_UNIT = "공수"

HALF_DAY_LABOR_HOURS = 0.5
FULL_DAY_LABOR_HOURS = 1.0

DEFAULT_OVERTIME_MULTIPLIER = 1.5
DEFAULT_HOURLY_RATE = 15000

AVERAGE_DECIMAL_PLACES = 2
DISPLAY_DECIMAL_PLACES = 1
