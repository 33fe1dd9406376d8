from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from ..common.datetime_utils import in_period, week_start
from ..core.enums import ActionKind, Period
from .calculator.base import pair_sessions
from .calculator.closed_calculator import ClosedSessionCalculator
from .calculator.running_calculator import RunningSessionCalculator


@dataclass(frozen=True)
class Action:
    """Domain entity: one clock-in or clock-out at a timezone-aware instant."""

    kind: ActionKind
    timestamp: datetime

    @classmethod
    def clock_in(cls, timestamp: datetime) -> "Action":
        return cls(ActionKind.IN, timestamp)

    @classmethod
    def clock_out(cls, timestamp: datetime) -> "Action":
        return cls(ActionKind.OUT, timestamp)

    @property
    def is_in(self) -> bool:
        return self.kind is ActionKind.IN

    @property
    def is_out(self) -> bool:
        return self.kind is ActionKind.OUT


@dataclass
class Timesheet:
    """Ordered log of clock actions.

    Insertion order is the chronological order of events. Nothing here checks
    the in/out alternation; TimeclockService guards it one step at a time and
    ``alternation_violations`` reports breaks in a loaded log.

    Every query takes ``now`` explicitly. An action belongs to the wall-clock
    date of its own timestamp, so offsets recorded before a DST change keep
    their day.
    """

    clocks: list[Action] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.clocks)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.clocks)

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self.clocks)

    def clock_in(self, timestamp: datetime) -> Action:
        action = Action.clock_in(timestamp)
        self.clocks.append(action)
        return action

    def clock_out(self, timestamp: datetime) -> Action:
        action = Action.clock_out(timestamp)
        self.clocks.append(action)
        return action

    def last_action(self) -> Optional[Action]:
        return self.clocks[-1] if self.clocks else None

    def actions_in(self, period: Period, now: datetime) -> list[Action]:
        today = now.date()
        return [a for a in self.clocks if in_period(a.timestamp.date(), period, today)]

    def total_time(self, period: Period, now: datetime) -> timedelta:
        """Time clocked this period, closed sessions only."""
        return ClosedSessionCalculator().total(self.actions_in(period, now))

    def running_time(self, now: datetime) -> timedelta:
        """Time clocked today, counting an open session up to ``now``."""
        return RunningSessionCalculator(now).total(self.actions_in(Period.DAY, now))

    def weekly_hours(self, now: datetime, on: Optional[date] = None) -> list[timedelta]:
        """Closed-session totals for Monday..Sunday of the week containing ``on``.

        Each session is credited to the day of its clock-in.
        """
        monday = week_start(on or now.date())
        sunday = monday + timedelta(days=6)
        week = [a for a in self.clocks if monday <= a.timestamp.date() <= sunday]

        per_day: dict[date, timedelta] = defaultdict(timedelta)
        sessions, _ = pair_sessions(week)
        for clock_in, clock_out in sessions:
            per_day[clock_in.timestamp.date()] += clock_out.timestamp - clock_in.timestamp

        return [per_day[monday + timedelta(days=offset)] for offset in range(7)]

    def alternation_violations(self) -> list[int]:
        """Indexes of actions that break the in/out alternation starting with in."""
        violations: list[int] = []
        expected = ActionKind.IN
        for index, action in enumerate(self.clocks):
            if action.kind is not expected:
                violations.append(index)
            expected = ActionKind.OUT if action.kind is ActionKind.IN else ActionKind.IN
        return violations
