from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from ..core.enums import Period


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 datetime, accepting a trailing ``Z`` for UTC."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_local_datetime(value: str, tz: Optional[tzinfo] = None) -> datetime:
    """Parse an ISO-8601 datetime; naive values are taken as local time in ``tz``."""
    return ensure_aware(parse_iso_datetime(value), tz)


def ensure_aware(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    if value.tzinfo is not None:
        return value
    if tz is None:
        return value.astimezone()
    return value.replace(tzinfo=tz)


def now_local() -> datetime:
    """Current local time, timezone-aware.

    Note: Wrapped so services can take it as an injectable clock.
    """
    return datetime.now().astimezone()


def week_start(day: date) -> date:
    """Monday on or before ``day``."""
    return day - timedelta(days=day.weekday())


def period_start(period: Period, today: date) -> date:
    if period is Period.DAY:
        return today
    if period is Period.WEEK:
        return week_start(today)
    if period is Period.MONTH:
        return today.replace(day=1)
    if period is Period.YEAR:
        return today.replace(month=1, day=1)
    raise ValueError(f"Unknown period: {period!r}")


def in_period(day: date, period: Period, today: date) -> bool:
    """Whether ``day`` falls in the current ``period`` window.

    Day is an exact match; the longer periods are open-ended ("on or after
    the start"), so future-dated actions still count.
    """
    if period is Period.DAY:
        return day == today
    return day >= period_start(period, today)


def format_hms(delta: timedelta) -> str:
    """Format a duration as HH:MM:SS; hours are not wrapped at 24."""
    total = int(delta.total_seconds())
    sign = "-" if total < 0 else ""
    hours, rem = divmod(abs(total), 3600)
    minutes, seconds = divmod(rem, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
