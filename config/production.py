import os

TIMESHEET_PATH = os.getenv("TIMESHEET_PATH")
TIMESHEET_FILENAME = "timesheet.json"

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STRICT_ALTERNATION = bool(int(os.getenv("STRICT_ALTERNATION", "1")))
