"""Report records that break the in/out alternation of the timesheet."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timeclock.timeclock.common.paths import resolve_timesheet_path
from src.timeclock.timeclock.timesheet.json_timesheet_repository import JsonFileTimesheetRepository
from src.timeclock.timeclock.timesheet.model import Timesheet


def describe_violations(timesheet: Timesheet) -> list[str]:
    lines = []
    for index in timesheet.alternation_violations():
        action = timesheet.clocks[index]
        lines.append(f"#{index}: unexpected '{action.kind.value}' at {action.timestamp.isoformat()}")
    return lines


def main() -> int:
    settings = importlib.import_module(get_settings_module())
    timesheet_path = resolve_timesheet_path(settings.TIMESHEET_PATH, filename=settings.TIMESHEET_FILENAME)

    timesheet = JsonFileTimesheetRepository(timesheet_path).load()
    problems = describe_violations(timesheet)
    for line in problems:
        print(line)

    if problems:
        print(f"FAIL: {len(problems)} record(s) break in/out alternation in {timesheet_path}")
        return 1
    print(f"OK: {len(timesheet)} record(s) in {timesheet_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
