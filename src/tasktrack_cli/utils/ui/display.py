"""Display capability used by the menu controller.

The controller only needs to print text and read a line; everything about
colors and screen handling stays behind :class:`Display`, so the menu can
be driven from tests without a real terminal.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import IO, Protocol

from rich.console import Console
from rich.markup import escape

from tasktrack_cli.models import Task
from tasktrack_cli.utils.ui import formatters
from tasktrack_cli.utils.ui.console import get_console


class Display(Protocol):
    """What the menu controller needs from the terminal."""

    def print(self, text: str = "") -> None: ...

    def read_line(self, prompt: str) -> str: ...

    def clear(self) -> None: ...

    def show_tasks(self, tasks: Sequence[Task]) -> None: ...

    def show_task(self, task: Task) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...


class ConsoleDisplay:
    """Display backed by a Rich console.

    Args:
        console: Console to write to; defaults to the shared console
        stream: Optional stream to read input from instead of stdin
        clear_screen: Clear the terminal between screens
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: IO[str] | None = None,
        clear_screen: bool = True,
    ):
        self.console = console or get_console()
        self.stream = stream
        self.clear_screen = clear_screen

    def print(self, text: str = "") -> None:
        self.console.print(text)

    def read_line(self, prompt: str) -> str:
        """Read one line of input, stripped.

        Raises:
            EOFError: When the input is exhausted.
        """
        line = self.console.input(f"[blue]{prompt}[/blue]", stream=self.stream)
        # rich returns "" from a drained stream instead of raising
        if self.stream is not None and not line:
            raise EOFError
        return line.strip()

    def clear(self) -> None:
        if self.clear_screen and self.console.is_terminal:
            self.console.clear()

    def show_tasks(self, tasks: Sequence[Task]) -> None:
        formatters.format_task_table(tasks, console=self.console)

    def show_task(self, task: Task) -> None:
        formatters.format_task_detail(task, console=self.console)

    def error(self, message: str) -> None:
        formatters.format_error(escape(message), console=self.console)

    def warning(self, message: str) -> None:
        formatters.format_warning(escape(message), console=self.console)

    def success(self, message: str) -> None:
        formatters.format_success(escape(message), console=self.console)

    def info(self, message: str) -> None:
        formatters.format_info(escape(message), console=self.console)
