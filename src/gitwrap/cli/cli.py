from pathlib import Path

import click

from gitwrap.cli.commands.config_cmd import config_group
from gitwrap.cli.commands.log_cmd import commits_cmd, date_cmd, last_commit_cmd, message_cmd
from gitwrap.cli.commands.push_cmd import push_cmd, push_hash_cmd
from gitwrap.cli.commands.refs_cmd import branch_cmd, refs_cmd
from gitwrap.cli.commands.remote_cmd import fetch_cmd, remote_cmd
from gitwrap.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitwrap")
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    help="Run git in this directory.",
)
@click.option("--remote", default=None, help="Remote name to use instead of looking it up.")
@click.option("--dry-run", is_flag=True, help="Print fetch/push commands instead of running them.")
@click.option("-v", "--verbose", is_flag=True, help="Echo fetch/push commands as they run.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    directory: Path,
    remote: str | None,
    dry_run: bool,
    verbose: bool,
    debug: bool,
) -> None:
    """Typed access to common git remote and history operations."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(
            directory=directory,
            remote=remote,
            dry_run=dry_run,
            verbose=verbose,
            debug=debug,
        )


cli.add_command(remote_cmd)
cli.add_command(fetch_cmd)
cli.add_command(refs_cmd)
cli.add_command(branch_cmd)
cli.add_command(commits_cmd)
cli.add_command(last_commit_cmd)
cli.add_command(message_cmd)
cli.add_command(date_cmd)
cli.add_command(push_cmd)
cli.add_command(push_hash_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `gitwrap` console script."""
    cli()
