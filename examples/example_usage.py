"""Example: use the service layer directly (no CLI).

Goal: show that commands are a thin layer, the logic lives in the services.
"""

import importlib

from config import get_settings_module

from src.timeclock.timeclock.common.datetime_utils import format_hms
from src.timeclock.timeclock.common.paths import resolve_timesheet_path
from src.timeclock.timeclock.container import build_container
from src.timeclock.timeclock.core.enums import Period


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        timesheet_path=resolve_timesheet_path(settings.TIMESHEET_PATH, filename=settings.TIMESHEET_FILENAME),
    )
    print(container.timeclock_service.status())
    print(format_hms(container.timeclock_service.time_clocked(Period.WEEK)))


if __name__ == "__main__":
    main()
