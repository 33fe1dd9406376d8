import os

TIMESHEET_PATH = os.getenv("TIMESHEET_PATH")
TIMESHEET_FILENAME = "timesheet.test.json"

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

STRICT_ALTERNATION = False
