from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Iterable

from .base import DurationCalculator, pair_sessions, sum_sessions

if TYPE_CHECKING:
    from ..model import Action


class ClosedSessionCalculator(DurationCalculator):
    """Standard rule: sum of (out - in) over closed sessions; an open session counts 0."""

    def total(self, actions: Iterable[Action]) -> timedelta:
        sessions, _ = pair_sessions(actions)
        return sum_sessions(sessions)
