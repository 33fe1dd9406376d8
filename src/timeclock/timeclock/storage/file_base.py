from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from ..core.exceptions import StorageUnavailableError, TimesheetParseError


@contextmanager
def atomic_writer(path: Path, *, encoding: str = "utf-8") -> Iterator[IO[str]]:
    """Write to a temporary sibling of ``path`` and move it into place on success.

    Readers only ever see the old or the new content. On error the temporary
    file is removed and ``path`` is left untouched.
    """
    directory = path.parent
    if not directory.is_dir():
        raise StorageUnavailableError(f"Timesheet directory does not exist: {directory}")

    try:
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as exc:
        raise StorageUnavailableError(f"Cannot write to {directory}: {exc}") from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as fh:
            yield fh
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def read_text(path: Path, *, encoding: str = "utf-8") -> str:
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise TimesheetParseError(f"Timesheet {path} is not valid {encoding} text: {exc}") from exc
    except OSError as exc:
        raise StorageUnavailableError(f"Cannot read {path}: {exc}") from exc
