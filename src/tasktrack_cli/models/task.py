"""Task data model."""

from __future__ import annotations

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from tasktrack_cli.exceptions import BadDateError

DUE_DATE_FORMAT = "%b %d, %Y"
DUE_DATE_HINT = "Jan 02, 2006"

# strptime alone would also take "Dec 5, 2024"; the day must be two digits.
_DUE_DATE_PATTERN = re.compile(r"[A-Za-z]{3} [0-9]{2}, [0-9]{4}", re.ASCII)


def parse_due_date(text: str) -> date:
    """Parse a due date written as ``Mon DD, YYYY`` (e.g. ``Dec 25, 2024``).

    Raises:
        BadDateError: If the text does not match the format or names an
            impossible date.
    """
    if not _DUE_DATE_PATTERN.fullmatch(text):
        raise BadDateError(text)
    try:
        return datetime.strptime(text, DUE_DATE_FORMAT).date()
    except ValueError as e:
        raise BadDateError(text) from e


def format_due_date(value: date) -> str:
    """Format a due date the same way users type it."""
    return value.strftime(DUE_DATE_FORMAT)


class Task(BaseModel):
    """Task model.

    Attributes:
        id: Positive integer, unique among live tasks when created
        title: Upper-cased task title
        assigned_to: Upper-cased assignee, may be empty
        completed: Completion flag (persisted as ``Status``)
        due_date: Calendar due date
        created_at: Creation timestamp, never modified

    Field aliases are the names used in the task file.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(alias="ID", gt=0)
    title: str = Field(alias="Title", min_length=1)
    assigned_to: str = Field(default="", alias="AssignedTo")
    completed: bool = Field(default=False, alias="Status")
    due_date: date = Field(alias="DueDate")
    created_at: datetime = Field(alias="TimeCreated")

    @property
    def formatted_due_date(self) -> str:
        return format_due_date(self.due_date)

    def render(self) -> str:
        """Single-line summary used in listings and log messages."""
        return (
            f"ID: {self.id}, Title: {self.title}, "
            f"Assigned To: {self.assigned_to}, Due Date: {self.formatted_due_date}"
        )
