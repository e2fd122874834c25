"""Repository interfaces for the TaskTrack CLI.

The abstract base class here is the "Port" the task store talks to.
Implementations (Adapters) live in ``tasktrack_cli.adapters``.
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
