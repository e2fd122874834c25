"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state:
platformdirs locations are redirected into ``tmp_path`` and module-level
singletons are reset around every test.
"""

from __future__ import annotations

import io
import logging
import logging.handlers
from collections.abc import Sequence
from datetime import UTC, date, datetime
from unittest.mock import patch

import pytest
from rich.console import Console

from tasktrack_cli.exceptions import StorageError
from tasktrack_cli.models import Task
from tasktrack_cli.repositories import TaskRepository
from tasktrack_cli.utils.ui.display import ConsoleDisplay


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    logger = logging.getLogger("tasktrack_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Keep logs and config inside tmp_path and reset cached singletons."""
    import tasktrack_cli.config as config_mod
    import tasktrack_cli.utils.logger as logger_mod
    from tasktrack_cli.utils.ui.console import get_console

    logger_mod._logger = None
    config_mod._config_manager = None
    _drop_file_handlers()
    get_console.cache_clear()

    with patch("tasktrack_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        with patch("tasktrack_cli.config.user_config_dir", return_value=str(tmp_path / "config")):
            yield tmp_path

    _drop_file_handlers()
    logger_mod._logger = None
    config_mod._config_manager = None
    get_console.cache_clear()


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class InMemoryTaskRepository(TaskRepository):
    """Repository keeping the last saved collection in memory."""

    def __init__(self, tasks: Sequence[Task] = ()):
        self.saved: list[Task] = list(tasks)
        self.save_calls = 0
        self.fail_saves = False

    def load(self) -> list[Task]:
        return list(self.saved)

    def save(self, tasks: Sequence[Task]) -> None:
        self.save_calls += 1
        if self.fail_saves:
            raise StorageError("Cannot write task file Tasks.json: disk full")
        self.saved = list(tasks)


def make_task(
    id_: int = 1,
    title: str = "BUY MILK",
    assigned_to: str = "",
    due: date = date(2024, 12, 25),
    completed: bool = False,
) -> Task:
    return Task(
        id=id_,
        title=title,
        assigned_to=assigned_to,
        completed=completed,
        due_date=due,
        created_at=datetime(2024, 12, 1, 9, 30, tzinfo=UTC),
    )


@pytest.fixture()
def repo():
    return InMemoryTaskRepository()


def scripted_display(*lines: str) -> ConsoleDisplay:
    """ConsoleDisplay reading ``lines`` as input and writing to a buffer."""
    console = Console(file=io.StringIO(), width=200, color_system=None)
    stream = io.StringIO("".join(f"{line}\n" for line in lines))
    return ConsoleDisplay(console=console, stream=stream)


def output_of(display: ConsoleDisplay) -> str:
    return display.console.file.getvalue()


@pytest.fixture()
def task_factory():
    """Build Task objects with sensible defaults."""
    return make_task


@pytest.fixture()
def display_factory():
    """Build a ConsoleDisplay that reads the given lines as user input."""
    return scripted_display


@pytest.fixture()
def read_output():
    """Return everything a scripted display has printed."""
    return output_of
