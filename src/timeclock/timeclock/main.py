from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.markup import escape

from config import get_settings_module

from .common.cli import err_console
from .common.logging_utils import configure_logging
from .common.paths import resolve_timesheet_path
from .container import build_container
from .core.exceptions import DomainError
from .report.controller import register as register_report
from .timesheet.controller import register as register_timesheet

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="timeclock",
    help="Clock in, clock out and see how long you have worked.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def setup(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Log where the timesheet is loaded from and saved to"),
    timesheet: Optional[Path] = typer.Option(None, "--timesheet", help="Use this timesheet file instead of the default"),
) -> None:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    debug = debug or bool(getattr(settings, "DEBUG", False))
    configure_logging("DEBUG" if debug else getattr(settings, "LOG_LEVEL", "INFO"))
    logger.debug("settings=%s", settings_module)

    try:
        timesheet_path = resolve_timesheet_path(
            timesheet or getattr(settings, "TIMESHEET_PATH", None),
            filename=getattr(settings, "TIMESHEET_FILENAME", "timesheet.json"),
        )
    except DomainError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        raise typer.Exit(1)

    ctx.obj = build_container(
        timesheet_path=timesheet_path,
        strict_alternation=bool(getattr(settings, "STRICT_ALTERNATION", False)),
    )


register_timesheet(app)
register_report(app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
