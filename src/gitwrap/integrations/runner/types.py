"""Type definitions for command runner operations."""

from typing import NamedTuple


class CommandResult(NamedTuple):
    """Result from running a subprocess command.

    The fields distinguish three situations that matter to callers:
    the process never ran (error set, stdout and returncode None), the process
    ran and printed nothing (stdout == ""), and the process ran and printed
    output.

    Attributes:
        stdout: Standard output, or None if the process did not run
        returncode: Exit code, or None if the process did not run
        stderr: Standard error, or None if the process did not run
        error: The OSError raised while starting the process, if any
    """

    stdout: str | None
    returncode: int | None
    stderr: str | None = None
    error: OSError | None = None

    @property
    def ran(self) -> bool:
        """True if the process was started."""
        return self.error is None

    @property
    def success(self) -> bool:
        """True if the process ran and exited with code 0."""
        return self.ran and self.returncode == 0
