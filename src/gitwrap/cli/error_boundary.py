"""Error boundary handling for CLI commands.

Catches well-known exceptions at command entry points and displays clean
error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from gitwrap.errors import GitError
from gitwrap.output import user_output

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns predictable failures into `Error:` messages and exit code 1.

    Catches:
        - GitError: any git client failure
        - ValueError: invalid input or configuration
        - PermissionError: config file cannot be written

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GitError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None
        except PermissionError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
