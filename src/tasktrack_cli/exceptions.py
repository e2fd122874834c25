"""Error types shared across TaskTrack CLI."""

from __future__ import annotations

from pathlib import Path

from tasktrack_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
)


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class TaskValidationError(AppError):
    """User input rejected before it reaches the task collection."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_INVALID_ARGS)


class BadDateError(TaskValidationError):
    """Due date text does not match the ``Mon DD, YYYY`` format."""

    def __init__(self, text: str):
        super().__init__(f"Invalid due date {text!r}, expected format like 'Jan 02, 2006'")
        self.text = text


class TaskNotFoundError(AppError):
    """No task with the requested ID exists."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found", exit_code=ERROR_NOT_FOUND)
        self.task_id = task_id


class StorageError(AppError):
    """The task file could not be read or written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message, exit_code=ERROR_STORAGE)
        self.path = path


class CorruptTaskFileError(StorageError):
    """The task file exists but does not contain a valid task list."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Task file {path} is not a valid task list and was left untouched: {reason}",
            path=path,
        )
        self.reason = reason
