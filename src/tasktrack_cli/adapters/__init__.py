"""Adapters module - Repository implementations for different storage backends.

- json_file: pretty-printed JSON file in the working directory
"""

from .json_file import DEFAULT_TASK_FILE, JsonTaskRepository

__all__ = ["JsonTaskRepository", "DEFAULT_TASK_FILE"]
