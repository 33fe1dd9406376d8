"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

APP_NAME = "timeclock"
TIMESHEET_FILENAME = "timesheet.json"
TIMESHEET_ROOT_KEY = "clocks"

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WEEKEND_DAYS = frozenset({5, 6})
