"""In-memory fake command runner for testing.

FakeCommandRunner returns scripted CommandResults without spawning processes
and records every call so tests can assert on the exact command lines.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path

from gitwrap.integrations.runner.abc import CommandRunner
from gitwrap.integrations.runner.types import CommandResult


class FakeCommandRunner(CommandRunner):
    """Fake runner with responses keyed by argument tuple.

    All state is provided via constructor or captured during execution.

    Usage:
        runner = FakeCommandRunner(
            responses={("remote",): CommandResult(stdout="origin\\n", returncode=0)},
        )
    """

    def __init__(
        self,
        responses: Mapping[tuple[str, ...], CommandResult] | None = None,
        *,
        default: CommandResult | None = None,
    ) -> None:
        """Create a fake runner.

        Args:
            responses: Results keyed by the argument tuple (program excluded)
            default: Result for commands with no scripted response.
                Defaults to a successful run with empty output.
        """
        self._responses = dict(responses) if responses is not None else {}
        self._default = default if default is not None else CommandResult(stdout="", returncode=0)
        self._calls: list[list[str]] = []
        self._cwds: list[Path] = []

    @property
    def calls(self) -> list[list[str]]:
        """Full command lines (program first) in the order they were run.

        This property is for test assertions only.
        """
        return self._calls

    @property
    def cwds(self) -> list[Path]:
        """Working directories passed to each run, parallel to calls."""
        return self._cwds

    def run(self, program: str, args: Sequence[str], *, cwd: Path) -> CommandResult:
        """Record the call and return the scripted result."""
        self._calls.append([program, *args])
        self._cwds.append(cwd)
        return self._responses.get(tuple(args), self._default)
