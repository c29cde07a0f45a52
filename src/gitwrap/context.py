"""Application context with dependency injection."""

import logging
from dataclasses import dataclass
from pathlib import Path

from gitwrap.client import GitClient
from gitwrap.config import (
    ConfigStore,
    FakeConfigStore,
    FilesystemConfigStore,
    GitwrapConfig,
    debug_enabled,
)
from gitwrap.integrations.runner.abc import CommandRunner
from gitwrap.integrations.runner.dry_run import DryRunCommandRunner
from gitwrap.integrations.runner.printing import PrintingCommandRunner
from gitwrap.integrations.runner.real import RealCommandRunner

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


@dataclass(frozen=True)
class GitwrapContext:
    """Immutable context holding all dependencies for CLI commands.

    Created at CLI entry point and threaded through the commands. Tests build
    one directly with a FakeCommandRunner and FakeConfigStore.
    """

    client: GitClient
    runner: CommandRunner
    config: GitwrapConfig
    config_store: ConfigStore
    dry_run: bool

    @staticmethod
    def for_test(
        runner: CommandRunner,
        *,
        cwd: Path,
        config_store: ConfigStore | None = None,
        remote: str | None = None,
        dry_run: bool = False,
    ) -> "GitwrapContext":
        """Create a context around a test runner.

        Args:
            runner: Usually a FakeCommandRunner with scripted responses
            cwd: Working directory given to the client
            config_store: Defaults to an empty FakeConfigStore
            remote: Pre-known remote name
            dry_run: Whether to wrap the runner in DryRunCommandRunner
        """
        store = config_store if config_store is not None else FakeConfigStore()
        config = store.load() if store.exists() else GitwrapConfig()
        wrapped: CommandRunner = DryRunCommandRunner(runner) if dry_run else runner
        client = GitClient(
            cwd,
            runner=wrapped,
            remote=remote or config.remote,
            git_executable=config.git_executable,
        )
        return GitwrapContext(
            client=client,
            runner=wrapped,
            config=config,
            config_store=store,
            dry_run=dry_run,
        )


def configure_logging(debug: bool) -> None:
    """Enable debug logging to stderr when requested."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)


def create_context(
    *,
    directory: Path,
    remote: str | None,
    dry_run: bool,
    verbose: bool,
    debug: bool = False,
    config_store: ConfigStore | None = None,
) -> GitwrapContext:
    """Create production context with real implementations.

    Args:
        directory: Working directory for git commands
        remote: Remote name from the command line, overriding config
        dry_run: If True, mutating git commands are printed instead of run
        verbose: If True, mutating git commands are echoed before running
        debug: If True, enable debug logging
        config_store: Config store override (defaults to ~/.gitwrap/config.toml)

    Returns:
        GitwrapContext whose client has not resolved its remote yet
    """
    # 1. Load config (defaults if no file)
    store = config_store if config_store is not None else FilesystemConfigStore()
    config = store.load() if store.exists() else GitwrapConfig()

    # 2. Logging
    configure_logging(debug or debug_enabled(config))

    # 3. Runner, with wrappers applied innermost first
    runner: CommandRunner = RealCommandRunner()
    if dry_run:
        runner = DryRunCommandRunner(runner)
    if verbose:
        runner = PrintingCommandRunner(runner, dry_run=dry_run)

    # 4. Client (remote resolved lazily on first use)
    client = GitClient(
        directory,
        runner=runner,
        remote=remote or config.remote,
        git_executable=config.git_executable,
    )

    return GitwrapContext(
        client=client,
        runner=runner,
        config=config,
        config_store=store,
        dry_run=dry_run,
    )
