"""Interactive commands for TaskTrack CLI."""
