from __future__ import annotations

from enum import Enum


class ActionKind(str, Enum):
    """Discriminator of a clock action, as written to the timesheet file."""

    IN = "in"
    OUT = "out"


class Period(str, Enum):
    """Aggregation window, always the current one ("this day", "this week", ...)."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
