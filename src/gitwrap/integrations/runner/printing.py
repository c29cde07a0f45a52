"""Printing command runner wrapper for verbose output.

This module provides a runner wrapper that prints styled output for mutating
commands before delegating to the wrapped implementation.
"""

from collections.abc import Sequence
from pathlib import Path

import click

from gitwrap.integrations.runner.abc import CommandRunner, format_command, is_mutating
from gitwrap.integrations.runner.types import CommandResult
from gitwrap.output import user_output


class PrintingCommandRunner(CommandRunner):
    """Wrapper that prints mutating commands before delegating.

    The wrapped implementation may be Real or DryRun.

    Usage:
        # For production
        printing_runner = PrintingCommandRunner(real_runner, dry_run=False)

        # For dry-run
        noop_inner = DryRunCommandRunner(real_runner)
        printing_runner = PrintingCommandRunner(noop_inner, dry_run=True)
    """

    def __init__(self, wrapped: CommandRunner, *, dry_run: bool) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: The runner to delegate to
            dry_run: Whether the wrapped runner is in dry-run mode
        """
        self._wrapped = wrapped
        self._dry_run = dry_run

    def run(self, program: str, args: Sequence[str], *, cwd: Path) -> CommandResult:
        """Print mutating commands, then delegate."""
        if is_mutating(args) and not self._dry_run:
            user_output(click.style(f"  {format_command(program, args)}", dim=True))
        result = self._wrapped.run(program, args, cwd=cwd)
        if is_mutating(args) and not self._dry_run and result.success:
            user_output(click.style("  ✓", fg="green"))
        return result
