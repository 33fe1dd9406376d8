from __future__ import annotations

from enum import Enum
from typing import Optional

import typer

from ..common.cli import console, exit_on_domain_error
from ..common.datetime_utils import format_hms, parse_local_datetime
from ..container import Container
from ..core.enums import Period


class Granularity(str, Enum):
    """Time clocked _this_ period."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


GRANULARITY_TO_PERIOD = {
    Granularity.TODAY: Period.DAY,
    Granularity.WEEK: Period.WEEK,
    Granularity.MONTH: Period.MONTH,
    Granularity.YEAR: Period.YEAR,
}


def _parse_at(value: Optional[str]):
    if value is None:
        return None
    try:
        return parse_local_datetime(value)
    except ValueError:
        raise typer.BadParameter(f"Not an ISO date-time: {value!r}", param_hint="--at") from None


def register(app: typer.Typer) -> None:
    @app.command("in", help="Clock in")
    @exit_on_domain_error
    def clock_in(
        ctx: typer.Context,
        at: Optional[str] = typer.Option(None, "--at", "-a", help="Clock in at YYYY-MM-DDTHH:MM[:SS] instead of now"),
    ) -> None:
        container: Container = ctx.obj
        action = container.timeclock_service.clock_in(at=_parse_at(at))
        console.print(f"[green]✓[/green] Clocked in at {action.timestamp:%Y-%m-%d %H:%M:%S}", highlight=False)

    @app.command("out", help="Clock out")
    @exit_on_domain_error
    def clock_out(
        ctx: typer.Context,
        at: Optional[str] = typer.Option(None, "--at", "-a", help="Clock out at YYYY-MM-DDTHH:MM[:SS] instead of now"),
    ) -> None:
        container: Container = ctx.obj
        action = container.timeclock_service.clock_out(at=_parse_at(at))
        console.print(f"[green]✓[/green] Clocked out at {action.timestamp:%Y-%m-%d %H:%M:%S}", highlight=False)

    @app.command("time-clocked", help="Get total time clocked (ins and outs paired).")
    @exit_on_domain_error
    def time_clocked(
        ctx: typer.Context,
        granularity: Granularity = typer.Argument(..., help="today, week, month or year"),
    ) -> None:
        container: Container = ctx.obj
        total = container.timeclock_service.time_clocked(GRANULARITY_TO_PERIOD[granularity])
        typer.echo(format_hms(total))

    @app.command("running-time", help="Get the time worked today, even if you haven't clocked out yet.")
    @exit_on_domain_error
    def running_time(ctx: typer.Context) -> None:
        container: Container = ctx.obj
        typer.echo(format_hms(container.timeclock_service.running_time()))

    @app.command("raw", help="Get the raw timesheet")
    @exit_on_domain_error
    def raw(ctx: typer.Context) -> None:
        container: Container = ctx.obj
        typer.echo(container.timeclock_service.raw_timesheet())

    @app.command("file", help="Returns the path to the timesheet file")
    def file(ctx: typer.Context) -> None:
        container: Container = ctx.obj
        typer.echo(container.timeclock_service.print_file())

    @app.command("wipe", help="Wipe the timesheet (not implemented, changes nothing)")
    @exit_on_domain_error
    def wipe(ctx: typer.Context) -> None:
        container: Container = ctx.obj
        container.timeclock_service.wipe()
        console.print("[yellow]Wipe is not implemented; the timesheet was left unchanged.[/yellow]")
