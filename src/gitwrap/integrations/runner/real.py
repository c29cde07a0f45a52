"""Production command runner using subprocess."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from gitwrap.integrations.runner.abc import CommandRunner, format_command
from gitwrap.integrations.runner.types import CommandResult

logger = logging.getLogger(__name__)


class RealCommandRunner(CommandRunner):
    """Production implementation using subprocess.run.

    Uses check=False so non-zero exits come back as data. OSError raised while
    starting the process (missing executable, bad cwd, permissions) is caught
    at this boundary and returned in CommandResult.error.
    """

    def run(self, program: str, args: Sequence[str], *, cwd: Path) -> CommandResult:
        """Run the command synchronously and capture its output."""
        cmd = [program, *args]
        logger.debug("running %s in %s", format_command(program, args), cwd)

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as e:
            logger.debug("failed to start %s: %s", program, e)
            return CommandResult(stdout=None, returncode=None, stderr=None, error=e)

        logger.debug("%s exited with code %d", program, result.returncode)
        return CommandResult(
            stdout=result.stdout,
            returncode=result.returncode,
            stderr=result.stderr,
        )
