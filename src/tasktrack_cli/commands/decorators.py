"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer
from rich.console import Console
from rich.markup import escape

from tasktrack_cli.config import get_config_manager
from tasktrack_cli.exceptions import AppError
from tasktrack_cli.utils.exit_codes import ERROR_GENERAL, get_exit_code_name
from tasktrack_cli.utils.logger import get_log_file, get_logger
from tasktrack_cli.utils.ui.console import get_console
from tasktrack_cli.utils.ui.formatters import format_error, format_info


def _error_console() -> Console:
    """Console honouring the configured color setting."""
    return get_console(get_config_manager().config.output.color)


def command_wrapper(func: Callable) -> Callable:
    """Log a command's lifetime and turn failures into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                get_exit_code_name(e.exit_code),
                str(e),
            )
            format_error(escape(str(e)), console=_error_console())
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s\n%s",
                cmd,
                elapsed,
                get_exit_code_name(ERROR_GENERAL),
                str(e),
                traceback.format_exc(),
            )
            console = _error_console()
            format_error(escape(f"An unexpected error occurred: {str(e)}"), console=console)
            format_info(f"Details were written to {get_log_file()}", console=console)
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
