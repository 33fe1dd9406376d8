from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """Send log records to stderr so command output on stdout stays clean."""
    if isinstance(level, str):
        level = level.upper()
    # basicConfig is a no-op when the root logger already has handlers
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level)
