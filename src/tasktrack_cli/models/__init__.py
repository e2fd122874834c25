"""TaskTrack CLI domain models.

Pydantic models for the task entity plus the helpers that parse and
format its due date.
"""

from .task import DUE_DATE_FORMAT, DUE_DATE_HINT, Task, format_due_date, parse_due_date

__all__ = [
    "Task",
    "DUE_DATE_FORMAT",
    "DUE_DATE_HINT",
    "parse_due_date",
    "format_due_date",
]
