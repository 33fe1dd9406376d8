from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .model import Timesheet


class TimesheetRepository(Protocol):
    @property
    def location(self) -> Path:
        raise NotImplementedError

    def load(self) -> Timesheet:
        """Return the stored timesheet, or an empty one when nothing is stored yet."""

        raise NotImplementedError

    def save(self, timesheet: Timesheet) -> None:
        """Replace the stored timesheet as a whole."""

        raise NotImplementedError
