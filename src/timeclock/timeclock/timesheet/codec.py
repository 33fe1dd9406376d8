"""JSON encoding of a Timesheet.

The document is ``{"clocks": [{"action": "in", "timestamp": "<ISO-8601>"}, ...]}``
with timezone-aware timestamps. Decoding is all-or-nothing: any malformed
record fails the whole document.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_datetime
from ..core.constants import TIMESHEET_ROOT_KEY
from ..core.enums import ActionKind
from ..core.exceptions import TimesheetParseError
from .model import Action, Timesheet


def action_to_dict(action: Action) -> dict[str, str]:
    return {"action": action.kind.value, "timestamp": action.timestamp.isoformat()}


def action_from_dict(data: Any, *, position: int) -> Action:
    if not isinstance(data, dict):
        raise TimesheetParseError(f"Record #{position} is not an object")

    try:
        kind = ActionKind(data["action"])
    except KeyError:
        raise TimesheetParseError(f"Record #{position} has no 'action'") from None
    except ValueError:
        raise TimesheetParseError(f"Record #{position} has unknown action {data['action']!r}") from None

    raw_ts = data.get("timestamp")
    if not isinstance(raw_ts, str):
        raise TimesheetParseError(f"Record #{position} has no 'timestamp'")
    try:
        timestamp = parse_iso_datetime(raw_ts)
    except ValueError:
        raise TimesheetParseError(f"Record #{position} has invalid timestamp {raw_ts!r}") from None
    if timestamp.tzinfo is None:
        raise TimesheetParseError(f"Record #{position} timestamp {raw_ts!r} has no UTC offset")

    return Action(kind, timestamp)


def to_dict(timesheet: Timesheet) -> dict[str, list[dict[str, str]]]:
    return {TIMESHEET_ROOT_KEY: [action_to_dict(a) for a in timesheet.clocks]}


def from_dict(data: Any) -> Timesheet:
    if not isinstance(data, dict) or not isinstance(data.get(TIMESHEET_ROOT_KEY), list):
        raise TimesheetParseError(f"Expected an object with a '{TIMESHEET_ROOT_KEY}' list")
    records = data[TIMESHEET_ROOT_KEY]
    return Timesheet(clocks=[action_from_dict(r, position=i) for i, r in enumerate(records)])


def dumps(timesheet: Timesheet, *, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(timesheet), indent=indent)


def loads(text: str) -> Timesheet:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TimesheetParseError(f"Timesheet is not valid JSON: {exc}") from exc
    return from_dict(data)
