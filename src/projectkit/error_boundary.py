"""Error boundary handling for CLI commands.

Decorated commands turn projectkit errors into a one-line message on stderr
and a process exit code, instead of a stack trace.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from projectkit.context import ProjectkitContext
from projectkit.errors import ConfigNotFoundError, ProjectkitError

T = TypeVar("T", bound=Callable[..., Any])

NO_CONFIG_EXIT_CODE = 1
ERROR_EXIT_CODE = 255


def format_error(err: BaseException) -> str:
    """Prefix the message with the steps recorded while the error propagated."""
    steps = list(reversed(getattr(err, "__notes__", [])))
    return ": ".join([*steps, str(err)])


def _debug_enabled() -> bool:
    click_ctx = click.get_current_context(silent=True)
    if click_ctx is None:
        return False
    obj = click_ctx.find_object(ProjectkitContext)
    return obj is not None and obj.debug


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and exits with a clean message.

    Catches:
        - ConfigNotFoundError: exit code 1 with a hint about config locations
        - ProjectkitError: exit code 255
        - OSError: exit code 255 (unexpected filesystem failures)

    With ``--debug`` every exception is re-raised for a full traceback.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: ProjectkitContext) -> None:
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (ProjectkitError, OSError) as e:
            if _debug_enabled():
                raise
            click.echo(f"Error: {format_error(e)}", err=True)
            if isinstance(e, ConfigNotFoundError):
                click.echo(
                    "Create a .projectkit.yaml in the current working directory "
                    "or in the home directory.",
                    err=True,
                )
                raise SystemExit(NO_CONFIG_EXIT_CODE) from None
            raise SystemExit(ERROR_EXIT_CODE) from None

    return wrapper  # type: ignore[return-value]
