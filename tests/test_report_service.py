from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from src.timeclock.timeclock.report.service import WeeklyReportService
from src.timeclock.timeclock.timesheet.model import Timesheet

TZ = timezone(timedelta(hours=2))
NOW = datetime(2026, 10, 16, 18, 0, tzinfo=TZ)


class FakeTimesheetRepo:
    def __init__(self, timesheet: Timesheet):
        self._timesheet = timesheet
        self.loads = 0

    def load(self) -> Timesheet:
        self.loads += 1
        return self._timesheet


def _timesheet() -> Timesheet:
    ts = Timesheet()
    ts.clock_in(datetime(2026, 10, 12, 8, 30, tzinfo=TZ))
    ts.clock_out(datetime(2026, 10, 12, 17, 30, tzinfo=TZ))
    ts.clock_in(datetime(2026, 10, 18, 10, 0, tzinfo=TZ))
    ts.clock_out(datetime(2026, 10, 18, 11, 15, tzinfo=TZ))
    ts.clock_in(datetime(2026, 10, 5, 9, 0, tzinfo=TZ))
    ts.clock_out(datetime(2026, 10, 5, 10, 0, tzinfo=TZ))
    return ts


def test_weekly_report_rows_monday_to_sunday():
    svc = WeeklyReportService(FakeTimesheetRepo(_timesheet()), clock=lambda: NOW)

    report = svc.build_weekly_report()

    assert report.week_start == date(2026, 10, 12)
    assert [r.day_name for r in report.rows] == [
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ]
    assert report.rows[0].hours == "09:00:00"
    assert report.rows[6].hours == "01:15:00"
    assert report.rows[3].duration == timedelta(0)
    assert [r.is_weekend for r in report.rows] == [False] * 5 + [True] * 2
    assert report.total_hours == "10:15:00"


def test_weekly_report_for_the_week_of_another_day():
    svc = WeeklyReportService(FakeTimesheetRepo(_timesheet()), clock=lambda: NOW)

    report = svc.build_weekly_report(on=date(2026, 10, 8))

    assert report.week_start == date(2026, 10, 5)
    assert report.rows[0].work_date == date(2026, 10, 5)
    assert report.rows[0].hours == "01:00:00"
    assert report.total == timedelta(hours=1)


def test_weekly_report_on_empty_timesheet():
    repo = FakeTimesheetRepo(Timesheet())
    svc = WeeklyReportService(repo, clock=lambda: NOW)

    report = svc.build_weekly_report()

    assert all(r.hours == "00:00:00" for r in report.rows)
    assert repo.loads == 1
