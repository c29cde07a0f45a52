"""Command runner operations for invoking external executables."""

from gitwrap.integrations.runner.abc import CommandRunner, format_command, is_mutating
from gitwrap.integrations.runner.dry_run import DryRunCommandRunner
from gitwrap.integrations.runner.fake import FakeCommandRunner
from gitwrap.integrations.runner.printing import PrintingCommandRunner
from gitwrap.integrations.runner.real import RealCommandRunner
from gitwrap.integrations.runner.types import CommandResult

__all__ = [
    # ABC interface
    "CommandRunner",
    "CommandResult",
    "format_command",
    "is_mutating",
    # Real implementation
    "RealCommandRunner",
    # Wrappers
    "DryRunCommandRunner",
    "PrintingCommandRunner",
    # Fake implementation
    "FakeCommandRunner",
]
