"""Output formatters for tasks and status messages."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tasktrack_cli.models import Task
from tasktrack_cli.utils.ui.console import get_console


def format_task_table(tasks: Sequence[Task], console: Console | None = None) -> None:
    """Format a list of tasks as a table."""
    console = console or get_console()
    if not tasks:
        console.print("[red]No tasks yet![/red]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right", style="bold yellow")
    table.add_column("Title", style="yellow")
    table.add_column("Assigned To")
    table.add_column("Due Date")
    table.add_column("Done", justify="center")

    for task in tasks:
        table.add_row(
            str(task.id),
            escape(task.title),
            escape(task.assigned_to) or "-",
            task.formatted_due_date,
            "✓" if task.completed else "✗",
        )

    console.print(table)


def format_task_detail(task: Task, console: Console | None = None) -> None:
    """Format a single task as key-value pairs."""
    console = console or get_console()
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="yellow")

    table.add_row("ID", str(task.id))
    table.add_row("Title", escape(task.title))
    table.add_row("Assigned To", escape(task.assigned_to) or "-")
    table.add_row("Due Date", task.formatted_due_date)
    table.add_row("Time Created", task.created_at.astimezone().strftime("%b %d, %Y %H:%M"))

    console.print(table)


def format_error(message: str, console: Console | None = None) -> None:
    """Format and display an error message."""
    (console or get_console()).print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str, console: Console | None = None) -> None:
    """Format and display a success message."""
    (console or get_console()).print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str, console: Console | None = None) -> None:
    """Format and display a warning message."""
    (console or get_console()).print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str, console: Console | None = None) -> None:
    """Format and display an info message."""
    (console or get_console()).print(f"[bold blue]Info:[/bold blue] {message}")
