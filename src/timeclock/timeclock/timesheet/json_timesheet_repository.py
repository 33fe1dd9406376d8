from __future__ import annotations

import logging
from pathlib import Path

from ..core.exceptions import InvalidTimesheetError, StorageUnavailableError
from ..storage.file_base import atomic_writer, read_text
from . import codec
from .model import Timesheet
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


class JsonFileTimesheetRepository(TimesheetRepository):
    """Timesheet stored as one pretty-printed JSON document, rewritten on every save."""

    def __init__(self, path: Path, *, strict_alternation: bool = False):
        self._path = Path(path)
        self._strict = bool(strict_alternation)

    @property
    def location(self) -> Path:
        return self._path

    def load(self) -> Timesheet:
        logger.debug("Loading timesheet from: %s", self._path)

        if not self._path.exists():
            logger.info("No timesheet found, creating a new one.")
            return Timesheet()
        if not self._path.is_file():
            raise StorageUnavailableError(f"Timesheet path is not a file: {self._path}")

        timesheet = codec.loads(read_text(self._path))
        self._check_alternation(timesheet)
        return timesheet

    def save(self, timesheet: Timesheet) -> None:
        logger.debug("Saving timesheet to: %s", self._path)

        with atomic_writer(self._path) as fh:
            fh.write(codec.dumps(timesheet, indent=2))

    def _check_alternation(self, timesheet: Timesheet) -> None:
        violations = timesheet.alternation_violations()
        if not violations:
            return

        message = (
            f"Timesheet {self._path} breaks in/out alternation at "
            f"record(s) {', '.join(str(i) for i in violations)}"
        )
        if self._strict:
            raise InvalidTimesheetError(message)
        logger.warning(message)
