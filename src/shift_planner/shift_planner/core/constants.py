"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAYS_PER_WEEK = 7
MINUTES_PER_DAY = 24 * 60

# Hourly drop slots shown on the planning grid: 08:00 .. 22:00
FIRST_SLOT_HOUR = 8
SLOT_COUNT = 15

DEFAULT_TOLERANCE_MINUTES = 0
UNKNOWN_EMPLOYEE_NAME = "Unknown Employee"
