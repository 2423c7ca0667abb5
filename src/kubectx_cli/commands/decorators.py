"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from kubectx_cli.commands.parser import usage
from kubectx_cli.models.exceptions import SelectionError, UsageError
from kubectx_cli.utils.exit_codes import ERROR_GENERAL
from kubectx_cli.utils.logger import get_logger
from kubectx_cli.utils.ui.formatters import format_error, format_info


def command_wrapper(_func: Callable | None = None, *, tool: str = "kubectx"):
    """Decorator that logs a command and turns errors into exit codes."""

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(tool)
            start = time.monotonic()
            logger.info("command started: %s %s", tool, kwargs.get("args") or "")
            try:
                result = func(*args, **kwargs)

                elapsed = time.monotonic() - start
                logger.info("command completed: %s (%.3fs)", tool, elapsed)
                return result

            except SelectionError as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s: %s",
                    tool,
                    elapsed,
                    type(e).__name__,
                    str(e),
                )
                format_error(str(e))
                if isinstance(e, UsageError):
                    format_info(usage(tool))
                raise typer.Exit(code=e.exit_code) from e

            except typer.Exit:
                raise

            except Exception as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s\n%s",
                    tool,
                    elapsed,
                    str(e),
                    traceback.format_exc(),
                )
                format_error(f"An unexpected error occurred: {str(e)}")
                raise typer.Exit(code=ERROR_GENERAL) from e

        return wrapper

    if _func is None:
        return decorator
    return decorator(_func)
