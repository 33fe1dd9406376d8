from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from .common.datetime_utils import now_local
from .report.service import WeeklyReportService
from .timesheet.json_timesheet_repository import JsonFileTimesheetRepository
from .timesheet.service import TimeclockService


@dataclass(frozen=True)
class Container:
    timesheets_repo: JsonFileTimesheetRepository

    timeclock_service: TimeclockService
    weekly_report_service: WeeklyReportService


def build_container(
    *,
    timesheet_path: Path,
    strict_alternation: bool = False,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    timesheets_repo = JsonFileTimesheetRepository(timesheet_path, strict_alternation=strict_alternation)

    timeclock_service = TimeclockService(timesheets_repo, clock=clock)
    weekly_report_service = WeeklyReportService(timesheets_repo, clock=clock)

    return Container(
        timesheets_repo=timesheets_repo,
        timeclock_service=timeclock_service,
        weekly_report_service=weekly_report_service,
    )
