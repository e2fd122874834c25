"""
Exit codes for TaskTrack CLI.

The interactive session always ends with SUCCESS; the remaining codes are
used when the session cannot start (for example an unreadable task file).
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Resource not found
ERROR_NOT_FOUND = 5

# Task file could not be read or written
ERROR_STORAGE = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for log messages."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")
