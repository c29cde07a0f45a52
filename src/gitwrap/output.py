"""Output helpers with clear intent.

user_output goes to stderr (messages meant for a person), machine_output goes
to stdout (results meant to be piped or parsed).
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Print a result to stdout."""
    click.echo(message, nl=nl)
