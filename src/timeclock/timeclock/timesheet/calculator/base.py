from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import TYPE_CHECKING, Iterable, Optional

from ...core.enums import ActionKind

if TYPE_CHECKING:
    from ..model import Action

Session = tuple["Action", "Action"]


def pair_sessions(actions: Iterable[Action]) -> tuple[list[Session], Optional[Action]]:
    """Pair each clock-in with the clock-out that follows it.

    Returns the closed (in, out) sessions and the clock-in still pending at
    the end, if any. An out without a pending in is dropped; of several ins
    in a row only the last one stays pending.
    """
    sessions: list[Session] = []
    pending: Optional[Action] = None
    for action in actions:
        if action.kind is ActionKind.IN:
            pending = action
        elif pending is not None:
            sessions.append((pending, action))
            pending = None
    return sessions, pending


def sum_sessions(sessions: Iterable[Session]) -> timedelta:
    total = timedelta(0)
    for clock_in, clock_out in sessions:
        total += clock_out.timestamp - clock_in.timestamp
    return total


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for reducing actions to a duration)."""

    @abstractmethod
    def total(self, actions: Iterable[Action]) -> timedelta:
        raise NotImplementedError
