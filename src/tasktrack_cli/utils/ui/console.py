"""Console utilities for TaskTrack CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(color: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=False, no_color=not color)
