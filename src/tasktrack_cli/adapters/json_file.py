"""JSON file implementation of TaskRepository."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tasktrack_cli.exceptions import CorruptTaskFileError, StorageError
from tasktrack_cli.models import Task
from tasktrack_cli.repositories import TaskRepository
from tasktrack_cli.utils.logger import get_logger

DEFAULT_TASK_FILE = "Tasks.json"

_TASK_LIST = TypeAdapter(list[Task])


class JsonTaskRepository(TaskRepository):
    """Stores the task collection as a JSON array in a single file.

    Every save rewrites the whole file. A missing file means no tasks have
    been saved yet; a file that cannot be parsed is reported and never
    overwritten by ``load``.
    """

    def __init__(self, path: str | Path = DEFAULT_TASK_FILE):
        self.path = Path(path)

    def load(self) -> list[Task]:
        logger = get_logger()
        if not self.path.exists():
            logger.info("task file %s not found, starting empty", self.path)
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.error("cannot read task file %s: %s", self.path, e)
            raise StorageError(f"Cannot read task file {self.path}: {e}", path=self.path) from e

        try:
            tasks = _TASK_LIST.validate_json(raw)
        except ValidationError as e:
            reason = _summarize(e)
            logger.error("task file %s is corrupt: %s", self.path, reason)
            raise CorruptTaskFileError(self.path, reason) from e

        logger.info("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        data = _TASK_LIST.dump_json(list(tasks), by_alias=True, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(data + b"\n")
        except OSError as e:
            raise StorageError(f"Cannot write task file {self.path}: {e}", path=self.path) from e


def _summarize(error: ValidationError) -> str:
    """First validation problem, with its location, as one line."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
