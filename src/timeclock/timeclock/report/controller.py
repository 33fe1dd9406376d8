from __future__ import annotations

from typing import Optional

import typer
from rich.table import Table

from ..common.cli import console, exit_on_domain_error
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from .service import WeeklyReport


def build_table(report: WeeklyReport) -> Table:
    table = Table(
        title=f"Week of {report.week_start:%Y-%m-%d} (total {report.total_hours})",
        header_style="bold",
    )
    for row in report.rows:
        colour = "yellow" if row.is_weekend else "green"
        table.add_column(row.day_name, header_style=f"bold {colour}", justify="center")
    table.add_row(*(row.hours for row in report.rows), style="bold")
    return table


def register(app: typer.Typer) -> None:
    @app.command("timesheet", help="Prints out the timesheet as a table")
    @exit_on_domain_error
    def timesheet(
        ctx: typer.Context,
        on: Optional[str] = typer.Option(None, "--on", "-o", help="Any day (YYYY-MM-DD) of the week to show"),
    ) -> None:
        container: Container = ctx.obj
        try:
            day = parse_iso_date(on) if on else None
        except ValueError:
            raise typer.BadParameter(f"Not a YYYY-MM-DD date: {on!r}", param_hint="--on") from None

        report = container.weekly_report_service.build_weekly_report(on=day)
        console.print(build_table(report))
