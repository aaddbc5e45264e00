"""Display components for CLI using Rich."""

import json

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from classdeps.analysis.models import FileError

console = Console()
err_console = Console(stderr=True)


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    err_console.print()
    err_console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_success(title: str, message: str) -> None:
    """Display a success message."""
    err_console.print(
        Panel(
            f"[bold green]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="green",
        )
    )


def show_file_errors(errors: list[FileError]) -> None:
    """Display the files an aggregate scan had to skip.

    Args:
        errors: Per-file failures.
    """
    if not errors:
        return

    table = Table(show_header=True, box=None)
    table.add_column("File", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Error", style="white")

    for error in errors:
        table.add_row(escape(error.file_path), error.kind.value, escape(error.message))

    err_console.print()
    err_console.print(
        Panel(
            table,
            title=f"[bold]{len(errors)} file(s) skipped[/]",
            border_style="red",
        )
    )


def print_json(data: object) -> None:
    """Print JSON-serializable data to stdout."""
    console.print_json(json.dumps(data))
