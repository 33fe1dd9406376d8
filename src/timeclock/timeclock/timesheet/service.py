from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional

from ..common.datetime_utils import ensure_aware, now_local
from ..core.enums import Period
from ..core.exceptions import AlreadyClockedInError, AlreadyClockedOutError
from . import codec
from .model import Action, Timesheet
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class ClockStatus:
    clocked_in: bool
    last_action: Optional[Action]


class TimeclockService:
    """Use cases around one timesheet: load, check clock state, mutate, save."""

    def __init__(self, timesheets: TimesheetRepository, *, clock: Clock = now_local):
        self._timesheets = timesheets
        self._clock = clock

    @property
    def file(self) -> Path:
        return self._timesheets.location

    def print_file(self) -> str:
        return str(self.file)

    def timesheet(self) -> Timesheet:
        return self._timesheets.load()

    def status(self) -> ClockStatus:
        last = self._timesheets.load().last_action()
        return ClockStatus(clocked_in=bool(last and last.is_in), last_action=last)

    def clock_in(self, *, at: Optional[datetime] = None) -> Action:
        timesheet = self._timesheets.load()

        last = timesheet.last_action()
        if last is not None and last.is_in:
            raise AlreadyClockedInError("You are already clocked in")

        action = timesheet.clock_in(self._stamp(at))
        self._timesheets.save(timesheet)
        logger.debug("Clocked in at %s", action.timestamp.isoformat())
        return action

    def clock_out(self, *, at: Optional[datetime] = None) -> Action:
        timesheet = self._timesheets.load()

        # An empty timesheet counts as clocked out.
        last = timesheet.last_action()
        if last is None or last.is_out:
            raise AlreadyClockedOutError("You are already clocked out")

        action = timesheet.clock_out(self._stamp(at))
        self._timesheets.save(timesheet)
        logger.debug("Clocked out at %s", action.timestamp.isoformat())
        return action

    def time_clocked(self, period: Period) -> timedelta:
        return self._timesheets.load().total_time(period, self._clock())

    def running_time(self) -> timedelta:
        return self._timesheets.load().running_time(self._clock())

    def raw_timesheet(self) -> str:
        return codec.dumps(self._timesheets.load())

    def wipe(self) -> None:
        # TODO: truncate the log once there is a confirmation prompt in front of it.
        logger.warning("Wiping the timesheet is not implemented; nothing was changed.")

    def _stamp(self, at: Optional[datetime]) -> datetime:
        now = self._clock()
        if at is None:
            return now
        return ensure_aware(at, now.tzinfo)
