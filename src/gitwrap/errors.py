"""Error types raised by git client operations.

All errors derive from GitError so callers can catch the whole family with a
single except clause. Each subclass maps to one failure mode:

- GitExecutionError: the git process could not be started at all
- NonZeroExitError: git ran but reported failure
- NotFoundError: git succeeded but produced no usable output
- GitParseError: output was present but did not have the expected shape
"""


class GitError(RuntimeError):
    """Base class for all git client failures."""


class GitExecutionError(GitError):
    """Raised when the git executable cannot be run."""


class NonZeroExitError(GitError):
    """Raised when a git command exits with a non-zero code.

    Attributes:
        operation: Git subcommand that failed (e.g. "fetch", "ls-remote")
        returncode: Exit code reported by the process
        stderr: Captured standard error, if any
    """

    def __init__(self, operation: str, returncode: int, stderr: str | None = None) -> None:
        self.operation = operation
        self.returncode = returncode
        self.stderr = stderr

        message = f"git {operation} command returned a non zero code"
        if stderr is not None and stderr.strip():
            message += f"\nstderr: {stderr.strip()}"
        super().__init__(message)


class NotFoundError(GitError):
    """Raised when git succeeds but returns nothing usable."""


class GitParseError(GitError):
    """Raised when git output does not match the expected format."""
