"""Error boundary handling for CLI commands.

Catches well-known exceptions at command entry points and displays clean
error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from rds_ui.cli.output import user_output
from rds_ui.core.errors import RdsUiError

logger = logging.getLogger(__name__)

WELL_KNOWN_ERRORS = (RdsUiError, FileNotFoundError, ValueError, PermissionError)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - RdsUiError: Missing config, unknown components, registry failures
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    When the click context carries an RdsContext with debug=True the
    exception is re-raised so the full traceback is shown. All other
    exceptions bubble up normally.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: RdsContext):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except WELL_KNOWN_ERRORS as e:
            if _debug_enabled():
                raise
            logger.debug("Command failed", exc_info=True)
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]


def _debug_enabled() -> bool:
    click_ctx = click.get_current_context(silent=True)
    if click_ctx is None:
        return False
    return bool(getattr(click_ctx.obj, "debug", False))
