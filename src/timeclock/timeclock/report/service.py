from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import format_hms, now_local, week_start
from ..core.constants import WEEKDAY_NAMES, WEEKEND_DAYS
from ..timesheet.repository import TimesheetRepository


@dataclass(frozen=True)
class WeeklyReportRow:
    day_name: str
    work_date: date
    duration: timedelta
    hours: str
    is_weekend: bool


@dataclass(frozen=True)
class WeeklyReport:
    week_start: date
    rows: list[WeeklyReportRow]
    total: timedelta

    @property
    def total_hours(self) -> str:
        return format_hms(self.total)


class WeeklyReportService:
    """Read-model for the Monday..Sunday hours table."""

    def __init__(self, timesheets: TimesheetRepository, *, clock: Callable[[], datetime] = now_local):
        self._timesheets = timesheets
        self._clock = clock

    def build_weekly_report(self, *, on: Optional[date] = None) -> WeeklyReport:
        now = self._clock()
        monday = week_start(on or now.date())
        durations = self._timesheets.load().weekly_hours(now, on=monday)

        rows = []
        for offset, duration in enumerate(durations):
            rows.append(
                WeeklyReportRow(
                    day_name=WEEKDAY_NAMES[offset],
                    work_date=monday + timedelta(days=offset),
                    duration=duration,
                    hours=format_hms(duration),
                    is_weekend=offset in WEEKEND_DAYS,
                )
            )

        return WeeklyReport(week_start=monday, rows=rows, total=sum(durations, timedelta(0)))
