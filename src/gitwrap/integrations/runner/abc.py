"""Abstract command runner interface.

The git client never calls subprocess directly. It hands a program name,
argument list and working directory to a CommandRunner and inspects the
CommandResult it gets back. This keeps the client testable with in-memory
fakes and lets dry-run/printing behaviour be layered on as wrappers.

Architecture:
- CommandRunner: Abstract base class defining the interface
- RealCommandRunner: Production implementation using subprocess
- FakeCommandRunner: Scripted in-memory implementation for tests
- DryRunCommandRunner / PrintingCommandRunner: wrappers around another runner
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from gitwrap.integrations.runner.types import CommandResult

# Git subcommands that change local or remote state.
MUTATING_GIT_SUBCOMMANDS = frozenset({"fetch", "push"})


def is_mutating(args: Sequence[str]) -> bool:
    """Check whether a git argument list would change repository state.

    Args:
        args: Arguments passed after the git executable

    Returns:
        True if the first argument is a mutating subcommand
    """
    if not args:
        return False
    return args[0] in MUTATING_GIT_SUBCOMMANDS


def format_command(program: str, args: Sequence[str]) -> str:
    """Render a command line for display."""
    return " ".join([program, *args])


class CommandRunner(ABC):
    """Abstract interface for running external commands synchronously."""

    @abstractmethod
    def run(self, program: str, args: Sequence[str], *, cwd: Path) -> CommandResult:
        """Run a command and wait for it to finish.

        Implementations must not raise for a missing executable or a non-zero
        exit code. Both are reported through the returned CommandResult.

        Args:
            program: Executable name or path (e.g. "git")
            args: Arguments passed to the executable
            cwd: Working directory for the process

        Returns:
            CommandResult describing what happened
        """
        ...
