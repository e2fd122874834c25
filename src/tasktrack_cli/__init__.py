"""TaskTrack CLI - a single-user terminal task tracker."""

__version__ = "0.1.0"
