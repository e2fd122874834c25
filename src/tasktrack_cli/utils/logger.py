"""Application-wide logger writing to platformdirs user_log_dir.

Log output never goes to the terminal; the interactive session owns the
screen. Use :func:`get_log_file` to point the user at the log when
something goes wrong.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tasktrack_cli"
_LOG_FILE = "tasktrack.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_log_file() -> Path:
    """Return the path of the active log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Handlers attached by someone else (e.g. log capture) do not stop the
    rotating file handler from being added.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if not _has_file_handler(logger):
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)

    _logger = logger
    return _logger
