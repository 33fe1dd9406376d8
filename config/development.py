import os

# Explicit timesheet file; when unset the platform data directory is used
TIMESHEET_PATH = os.getenv("TIMESHEET_PATH")
TIMESHEET_FILENAME = "timesheet.json"

DEBUG = bool(int(os.getenv("DEBUG", "0")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Fail on load when the stored log breaks in/out alternation (default: warn only)
STRICT_ALTERNATION = bool(int(os.getenv("STRICT_ALTERNATION", "0")))
