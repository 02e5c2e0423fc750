"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from todoapp.models.exceptions import (
    BackendConnectionError,
    RepositoryFactoryError,
    TodoAppError,
    ValidationError,
)
from todoapp.utils import exit_codes
from todoapp.utils.logger import get_logger
from todoapp.utils.ui.formatters import format_error


def _exit_code_for(error: TodoAppError) -> int:
    if isinstance(error, ValidationError):
        return exit_codes.ERROR_INVALID_ARGS
    if isinstance(error, (BackendConnectionError, RepositoryFactoryError)):
        return exit_codes.ERROR_BACKEND
    return exit_codes.ERROR_GENERAL


def command_wrapper(func: Callable):
    """Log timing of a command and turn application errors into exit codes."""

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

        except TodoAppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=_exit_code_for(e)) from e

        except (typer.Exit, typer.Abort):
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
