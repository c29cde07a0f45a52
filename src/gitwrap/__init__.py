"""Typed git client that shells out to the git executable."""

from gitwrap.client import GitClient, open_repository
from gitwrap.errors import (
    GitError,
    GitExecutionError,
    GitParseError,
    NonZeroExitError,
    NotFoundError,
)
from gitwrap.integrations.runner import (
    CommandResult,
    CommandRunner,
    DryRunCommandRunner,
    FakeCommandRunner,
    PrintingCommandRunner,
    RealCommandRunner,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "GitClient",
    "open_repository",
    # Errors
    "GitError",
    "GitExecutionError",
    "GitParseError",
    "NonZeroExitError",
    "NotFoundError",
    # Command runners
    "CommandResult",
    "CommandRunner",
    "DryRunCommandRunner",
    "FakeCommandRunner",
    "PrintingCommandRunner",
    "RealCommandRunner",
]
