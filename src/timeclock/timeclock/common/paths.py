from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

from ..core.constants import TIMESHEET_FILENAME
from ..core.exceptions import StorageUnavailableError


def platform_data_dir() -> Path:
    """Return the per-user data directory of the platform.

    Windows: %APPDATA%, macOS: ~/Library/Application Support,
    others: $XDG_DATA_HOME or ~/.local/share.
    """
    try:
        if sys.platform.startswith("win"):
            base = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
            return Path(base)
        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support"
        base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
        return Path(base)
    except RuntimeError as exc:
        # Path.home() raises when no home directory can be determined.
        raise StorageUnavailableError("Unable to locate timesheet.") from exc


def resolve_timesheet_path(
    explicit: Optional[Union[str, Path]] = None,
    *,
    filename: str = TIMESHEET_FILENAME,
) -> Path:
    if explicit:
        return Path(explicit).expanduser()
    return platform_data_dir() / filename
