"""No-op command runner wrapper for dry-run mode.

This module provides a runner wrapper that prevents execution of mutating git
subcommands while delegating read-only ones to the wrapped implementation.
"""

from collections.abc import Sequence
from pathlib import Path

import click

from gitwrap.integrations.runner.abc import CommandRunner, format_command, is_mutating
from gitwrap.integrations.runner.types import CommandResult
from gitwrap.output import user_output


class DryRunCommandRunner(CommandRunner):
    """No-op wrapper that prevents execution of mutating commands.

    Mutating commands (fetch, push) print what would happen and return a
    successful empty result. Everything else is delegated.

    Usage:
        real_runner = RealCommandRunner()
        noop_runner = DryRunCommandRunner(real_runner)

        # Prints instead of pushing
        noop_runner.run("git", ["push", "-f", "origin", "abc:refs/heads/main"], cwd=repo)
    """

    def __init__(self, wrapped: CommandRunner) -> None:
        """Create a dry-run wrapper around a CommandRunner.

        Args:
            wrapped: The runner to wrap (usually RealCommandRunner)
        """
        self._wrapped = wrapped

    def run(self, program: str, args: Sequence[str], *, cwd: Path) -> CommandResult:
        """Delegate read-only commands, print mutating ones."""
        if not is_mutating(args):
            return self._wrapped.run(program, args, cwd=cwd)

        user_output(
            click.style("[DRY RUN] ", fg="yellow") + f"Would run: {format_command(program, args)}"
        )
        return CommandResult(stdout="", returncode=0, stderr="")
