"""Repository abstraction layer for TaskTrack CLI.

The task store keeps the whole collection in memory and hands it to a
repository after every change, so the contract is whole-collection
load/save rather than per-record CRUD.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tasktrack_cli.models import Task


class TaskRepository(ABC):
    """Abstract base class for task persistence."""

    @abstractmethod
    def load(self) -> list[Task]:
        """Load the full task collection.

        Returns:
            Tasks in stored order; an empty list when nothing was stored yet

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            StorageError: If stored data cannot be read
            CorruptTaskFileError: If stored data cannot be parsed
        """
        raise NotImplementedError("TaskRepository.load() must be implemented by adapter")

    @abstractmethod
    def save(self, tasks: Sequence[Task]) -> None:
        """Replace the stored collection with ``tasks``.

        Args:
            tasks: Full collection in display order

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            StorageError: If the collection could not be written
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")
