"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from aura_session.models.focus.store import ParameterError
from aura_session.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS, get_exit_code_name
from aura_session.utils.logger import get_logger
from aura_session.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Wrap a command with logging and uniform error reporting."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except ParameterError as e:
            logger.warning(
                "command rejected: %s - %s (%s)", cmd, e, get_exit_code_name(ERROR_INVALID_ARGS)
            )
            format_error(str(e))
            raise typer.Exit(code=ERROR_INVALID_ARGS) from e

        except AppError as e:
            logger.error(
                "command failed: %s (%.3fs) - %s (%s)",
                cmd,
                time.monotonic() - start,
                e,
                get_exit_code_name(e.exit_code),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit as e:
            if e.exit_code:
                logger.info("command exited: %s -> %s", cmd, get_exit_code_name(e.exit_code))
            raise

        except Exception as e:
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                time.monotonic() - start,
                e,
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
