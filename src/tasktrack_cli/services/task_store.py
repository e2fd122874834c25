"""Task store - owns the in-memory task collection.

The store sits between the menu and the repository: every mutation is
applied to the in-memory list first and then flushed as a whole through
the repository.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from datetime import UTC, datetime
from typing import overload

from tasktrack_cli.exceptions import StorageError, TaskNotFoundError, TaskValidationError
from tasktrack_cli.models import Task, parse_due_date
from tasktrack_cli.repositories import TaskRepository
from tasktrack_cli.utils.logger import get_logger


class TaskView(Sequence[Task]):
    """Read-only, live view over the store's task list.

    The view never copies: it always reflects the current collection.
    Tasks themselves are frozen models, so nothing can be changed through it.
    """

    __slots__ = ("_tasks",)

    def __init__(self, tasks: list[Task]):
        self._tasks = tasks

    @overload
    def __getitem__(self, index: int) -> Task: ...

    @overload
    def __getitem__(self, index: slice) -> list[Task]: ...

    def __getitem__(self, index):
        return self._tasks[index]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TaskView):
            return self._tasks == other._tasks
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._tasks == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"TaskView({self._tasks!r})"


class TaskStore:
    """In-memory owner of the task collection.

    IDs are assigned as ``len(collection) + 1``. Once tasks have been
    deleted this can repeat an ID that is still live; lookups therefore
    always scan and act on the first match.
    """

    def __init__(self, repository: TaskRepository, tasks: list[Task] | None = None):
        """Initialize the task store.

        Args:
            repository: TaskRepository used to flush every change
            tasks: Initial collection; use :meth:`open` to load it from the repository
        """
        self.repository = repository
        self._tasks: list[Task] = list(tasks) if tasks else []
        self._dirty = False

    @classmethod
    def open(cls, repository: TaskRepository) -> TaskStore:
        """Build a store holding whatever the repository currently has."""
        return cls(repository, repository.load())

    @property
    def dirty(self) -> bool:
        """True when the last flush failed and memory is ahead of storage."""
        return self._dirty

    def create(self, title: str, assigned_to: str, due_date_text: str) -> Task:
        """Create a task and append it to the collection.

        Args:
            title: Task title, upper-cased before storing
            assigned_to: Assignee, upper-cased before storing (may be empty)
            due_date_text: Due date in ``Mon DD, YYYY`` format

        Returns:
            The created Task

        Raises:
            TaskValidationError: If the title is blank
            BadDateError: If the due date does not parse
            StorageError: If the task was added but could not be saved
        """
        title = title.strip().upper()
        if not title:
            raise TaskValidationError("Task title must not be empty")
        due_date = parse_due_date(due_date_text.strip())

        task = Task(
            id=len(self._tasks) + 1,
            title=title,
            assigned_to=assigned_to.strip().upper(),
            completed=False,
            due_date=due_date,
            created_at=datetime.now(UTC),
        )
        logger = get_logger()
        if any(existing.id == task.id for existing in self._tasks):
            logger.warning("task id %d is already in use by a live task", task.id)

        self._tasks.append(task)
        logger.info("created task: %s", task.render())
        self.flush()
        return task

    def list(self) -> TaskView:
        """Return a live read-only view of all tasks in insertion order."""
        return TaskView(self._tasks)

    def delete_by_id(self, task_id: int) -> Task:
        """Remove the first task whose id equals ``task_id``.

        Returns:
            The removed Task

        Raises:
            TaskNotFoundError: If no task has that id
            StorageError: If the task was removed but the change could not be saved
        """
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                break
        else:
            raise TaskNotFoundError(task_id)

        del self._tasks[index]
        get_logger().info("deleted task: %s", task.render())
        self.flush()
        return task

    def is_empty(self) -> bool:
        return not self._tasks

    def flush(self) -> None:
        """Write the full collection through the repository.

        On failure the in-memory collection is kept, the store is marked
        dirty and the StorageError is re-raised for the caller to report.
        """
        try:
            self.repository.save(self._tasks)
        except StorageError as e:
            self._dirty = True
            get_logger().error("save failed, %d task(s) kept in memory only: %s", len(self._tasks), e)
            raise
        self._dirty = False
