"""Git repository client built on the git command line.

GitClient turns typed method calls into git invocations, runs them through a
CommandRunner and parses the textual output. Every method runs at most one git
process (get_remote excepted when the remote is not cached yet) and raises a
GitError subclass on failure.

A client is bound to one working directory and caches the resolved remote
name. It holds no locks; use one client per thread.
"""

import logging
from datetime import datetime
from pathlib import Path

from gitwrap.errors import GitExecutionError, GitParseError, NonZeroExitError, NotFoundError
from gitwrap.integrations.runner.abc import CommandRunner, format_command
from gitwrap.integrations.runner.real import RealCommandRunner
from gitwrap.parsing import (
    build_ref_path,
    parse_commit_date,
    parse_commit_hashes,
    parse_remote_names,
    parse_remote_refs,
    select_remote,
)

DEFAULT_GIT_EXECUTABLE = "git"


class GitClient:
    """Typed interface over a handful of git operations.

    Construction never runs git. The remote is resolved on first use, or
    supplied up front via `remote`. Use open_repository() to resolve it
    eagerly.
    """

    def __init__(
        self,
        working_directory: Path | str,
        *,
        runner: CommandRunner | None = None,
        logger: logging.Logger | None = None,
        remote: str | None = None,
        git_executable: str = DEFAULT_GIT_EXECUTABLE,
    ) -> None:
        """Create a client bound to a working directory.

        Args:
            working_directory: Directory git commands run in
            runner: Command runner (defaults to RealCommandRunner)
            logger: Logger for diagnostics (defaults to this module's logger)
            remote: Pre-known remote name; skips lookup when given
            git_executable: Name or path of the git binary
        """
        self._working_directory = Path(working_directory)
        self._runner = runner if runner is not None else RealCommandRunner()
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._remote = remote if remote else None
        self._git = git_executable

    @property
    def working_directory(self) -> Path:
        """Directory every git command runs in."""
        return self._working_directory

    @property
    def remote(self) -> str | None:
        """Cached remote name, or None if it has not been resolved yet."""
        return self._remote

    def _run(self, args: list[str], operation: str, failure_message: str) -> str | None:
        """Run git and translate execution failures and non-zero exits into errors.

        Args:
            args: Arguments after the git executable
            operation: Subcommand name used in NonZeroExitError messages
            failure_message: Logged at warning level when git cannot be run

        Returns:
            Captured stdout, or None if the runner produced none
        """
        result = self._runner.run(self._git, args, cwd=self._working_directory)

        if result.error is not None:
            self._logger.warning(failure_message)
            raise GitExecutionError(
                f"Failed to run {format_command(self._git, args)}: {result.error}"
            ) from result.error

        if result.returncode is not None and result.returncode != 0:
            raise NonZeroExitError(operation, result.returncode, result.stderr)

        return result.stdout

    def get_remote(self) -> str:
        """Resolve the remote name, using the cached value when available.

        If git lists several remotes, the last one is used and a warning is
        logged.

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git remote` fails
            NotFoundError: If no remote is configured
        """
        if self._remote is not None:
            return self._remote

        self._logger.debug("looking up git remote")
        stdout = self._run(["remote"], "remote", "failed to lookup git remote")

        names = parse_remote_names(stdout or "")
        remote = select_remote(names)
        if remote is None:
            raise NotFoundError("failed to find a git remote")

        if len(names) > 1:
            self._logger.warning("multiple remotes were found, using the last one set '%s'", remote)

        self._remote = remote
        return remote

    def refresh_remote(self) -> str:
        """Forget the cached remote and resolve it again."""
        self._remote = None
        return self.get_remote()

    def fetch(self) -> None:
        """Fetch from the remote.

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git fetch` fails
        """
        remote = self.get_remote()
        self._logger.debug("running git fetch against remote %s", remote)
        self._run(["fetch", remote], "fetch", f"failed to fetch from remote {remote}")

    def list_remote_refs(self, ref_type: str) -> list[str]:
        """List reference names of one category on the remote.

        Lines that do not contain exactly one "refs/<ref_type>/" marker are
        skipped with a warning.

        Args:
            ref_type: Reference category, e.g. "heads" or "tags"

        Returns:
            Short reference names in the order git listed them

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git ls-remote` fails
            NotFoundError: If git printed nothing
        """
        remote = self.get_remote()
        self._logger.info("attempting to get a list of remote %s in git from %s", ref_type, remote)
        stdout = self._run(
            ["ls-remote", f"--{ref_type}", remote],
            "ls-remote",
            "failed to lookup from remote",
        )
        if stdout is None or not stdout.strip():
            raise NotFoundError(f"failed to find any {ref_type} against remote {remote}")

        refs = parse_remote_refs(stdout, ref_type)
        for line in refs.skipped:
            self._logger.warning("attempted to parse a reference of unexpected format: %s", line)

        return refs.names

    def list_commits(self, *commit_range: str) -> list[str]:
        """List commit hashes reachable from HEAD or within a range.

        Args:
            *commit_range: Optional revision range arguments passed to git log,
                e.g. "main..feature"

        Returns:
            Commit hashes, newest first; empty if there are none

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git log` fails
        """
        self._logger.debug("looking up git commits")
        stdout = self._run(
            ["log", '--pretty=format:"%H"', *commit_range],
            "log",
            "failed to run git log",
        )
        return parse_commit_hashes(stdout or "")

    def get_current_branch(self) -> str:
        """Get the name of the checked-out branch ("HEAD" when detached).

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git rev-parse` fails
        """
        self._logger.debug("getting the current branch")
        stdout = self._run(
            ["rev-parse", "--abbrev-ref", "HEAD"],
            "rev-parse",
            "failed to get the current git branch",
        )
        return (stdout or "").strip()

    def get_last_commit_on_ref(self, ref: str) -> str:
        """Get the most recent commit hash reachable from a reference.

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git rev-list` fails
            NotFoundError: If git printed no commit
        """
        self._logger.debug("get most recent commit for reference %s", ref)
        stdout = self._run(
            ["rev-list", "-n", "1", ref],
            "rev-list",
            f"failed to get commit for reference {ref}",
        )
        commit_hash = (stdout or "").strip()
        if not commit_hash:
            raise NotFoundError(f"failed to get commit on reference {ref}")
        return commit_hash

    def get_commit_message_body(self, commit_hash: str) -> str:
        """Get the full message of a commit, without trailing newlines.

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git log` fails
        """
        self._logger.debug("getting the commit message for %s", commit_hash)
        stdout = self._run(
            ["log", "--format=%B", "-n", "1", commit_hash],
            "log",
            f"failed to get the commit message for {commit_hash}",
        )
        return (stdout or "").rstrip("\n")

    def get_reference_datetime(self, ref: str) -> datetime:
        """Get the commit date of a reference.

        Returns:
            Timezone-aware datetime carrying the commit's UTC offset

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git log` fails
            NotFoundError: If git printed no date
            GitParseError: If the date is not in git's default format
        """
        self._logger.debug("going to try to get the date time for the reference %s", ref)
        stdout = self._run(
            ["log", "--format=%cd", "-n", "1", ref],
            "log",
            f"failed to get the commit date time for {ref}",
        )
        if stdout is None or not stdout.strip():
            raise NotFoundError(f"failed to get a date time for {ref}")

        parsed = parse_commit_date(stdout)
        if parsed is None:
            self._logger.warning("date time for %s came back in an unexpected format", ref)
            raise GitParseError(f"unexpected date format for {ref}: {stdout.strip()!r}")
        return parsed

    def force_push(self, source: str, destination: str) -> None:
        """Force-push a local object to a remote reference.

        Args:
            source: Local ref or commit hash
            destination: Fully qualified remote ref, e.g. "refs/heads/main"

        Raises:
            GitExecutionError: If git cannot be run
            NonZeroExitError: If `git push` fails
        """
        remote = self.get_remote()
        self._logger.debug("pushing %s to %s on remote %s", source, destination, remote)
        self._run(
            ["push", "-f", remote, f"{source}:{destination}"],
            "push",
            f"failed to force push to git ref {destination} on remote {remote}",
        )

    def force_push_hash_to_ref(self, commit_hash: str, ref: str, ref_type: str) -> None:
        """Force-push a commit to refs/<ref_type>/<ref> on the remote."""
        self.force_push(commit_hash, build_ref_path(ref_type, ref))


def open_repository(
    working_directory: Path | str,
    *,
    runner: CommandRunner | None = None,
    logger: logging.Logger | None = None,
    remote: str | None = None,
    git_executable: str = DEFAULT_GIT_EXECUTABLE,
) -> GitClient:
    """Create a GitClient and resolve its remote immediately.

    Raises:
        GitError: If the remote cannot be resolved
    """
    client = GitClient(
        working_directory,
        runner=runner,
        logger=logger,
        remote=remote,
        git_executable=git_executable,
    )
    client.get_remote()
    return client
