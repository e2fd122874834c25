"""Service layer for TaskTrack CLI."""

from .task_store import TaskStore, TaskView

__all__ = ["TaskStore", "TaskView"]
