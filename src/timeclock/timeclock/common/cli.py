from __future__ import annotations

from functools import wraps

import typer
from rich.console import Console
from rich.markup import escape

from ..core.exceptions import DomainError

console = Console()
err_console = Console(stderr=True)


def exit_on_domain_error(command):
    """Print a DomainError in red and exit with status 1 instead of a traceback."""

    @wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except DomainError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
            raise typer.Exit(1)

    return wrapper
