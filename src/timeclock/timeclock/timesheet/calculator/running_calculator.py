from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Iterable

from .base import DurationCalculator, pair_sessions, sum_sessions

if TYPE_CHECKING:
    from ..model import Action


class RunningSessionCalculator(DurationCalculator):
    """Closed sessions plus the open session measured up to ``now``."""

    def __init__(self, now: datetime):
        self._now = now

    def total(self, actions: Iterable[Action]) -> timedelta:
        sessions, pending = pair_sessions(actions)
        total = sum_sessions(sessions)
        if pending is not None:
            total += self._now - pending.timestamp
        return total
