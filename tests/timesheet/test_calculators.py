from datetime import datetime, timedelta, timezone

from src.timeclock.timeclock.timesheet.calculator import running_calculator
from src.timeclock.timeclock.timesheet.calculator.base import pair_sessions
from src.timeclock.timeclock.timesheet.calculator.closed_calculator import ClosedSessionCalculator
from src.timeclock.timeclock.timesheet.calculator.running_calculator import RunningSessionCalculator
from src.timeclock.timeclock.timesheet.model import Action

TZ = timezone(timedelta(hours=-5))


def test_pair_sessions_returns_closed_sessions_and_pending_in():
    first_in = Action.clock_in(datetime(2026, 3, 2, 9, 0, tzinfo=TZ))
    first_out = Action.clock_out(datetime(2026, 3, 2, 12, 0, tzinfo=TZ))
    second_in = Action.clock_in(datetime(2026, 3, 2, 13, 0, tzinfo=TZ))

    sessions, pending = pair_sessions([first_in, first_out, second_in])

    assert sessions == [(first_in, first_out)]
    assert pending == second_in


def test_closed_calculator_ignores_pending_in():
    actions = [
        Action.clock_in(datetime(2026, 3, 2, 9, 0, tzinfo=TZ)),
        Action.clock_out(datetime(2026, 3, 2, 17, 30, tzinfo=TZ)),
        Action.clock_in(datetime(2026, 3, 2, 18, 0, tzinfo=TZ)),
    ]

    assert ClosedSessionCalculator().total(actions) == timedelta(hours=8, minutes=30)


def test_running_calculator_measures_pending_in_until_now():
    now = datetime(2026, 3, 2, 12, 15, tzinfo=TZ)
    actions = [Action.clock_in(datetime(2026, 3, 2, 9, 0, tzinfo=TZ))]

    assert RunningSessionCalculator(now).total(actions) == timedelta(hours=3, minutes=15)
    assert RunningSessionCalculator(now).total([]) == timedelta(0)


def test_running_calculator_pairs_the_actions_once(monkeypatch):
    calls = []

    def counting_pair_sessions(actions):
        calls.append(actions)
        return pair_sessions(actions)

    monkeypatch.setattr(running_calculator, "pair_sessions", counting_pair_sessions)
    now = datetime(2026, 3, 2, 14, 0, tzinfo=TZ)
    actions = iter([
        Action.clock_in(datetime(2026, 3, 2, 9, 0, tzinfo=TZ)),
        Action.clock_out(datetime(2026, 3, 2, 12, 0, tzinfo=TZ)),
        Action.clock_in(datetime(2026, 3, 2, 13, 0, tzinfo=TZ)),
    ])

    assert RunningSessionCalculator(now).total(actions) == timedelta(hours=4)
    assert len(calls) == 1
