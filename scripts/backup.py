"""Backup the timesheet file.

Note: The copy is taken as-is (no parsing), so a corrupt timesheet can still
be saved before it is repaired by hand.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timeclock.timeclock.common.paths import resolve_timesheet_path


def backup_timesheet(timesheet_path: Path, out_dir: Path, *, now: Optional[datetime] = None) -> Path:
    if not timesheet_path.is_file():
        raise FileNotFoundError(f"No timesheet at {timesheet_path}")

    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{timesheet_path.stem}_{ts}{timesheet_path.suffix}"
    shutil.copy2(timesheet_path, out_file)
    return out_file


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    timesheet_path = resolve_timesheet_path(settings.TIMESHEET_PATH, filename=settings.TIMESHEET_FILENAME)

    try:
        out_file = backup_timesheet(timesheet_path, REPO_ROOT / "backups")
    except FileNotFoundError as exc:
        raise SystemExit(str(exc))
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
