import click

from gitwrap.cli.error_boundary import cli_error_boundary
from gitwrap.context import GitwrapContext
from gitwrap.output import machine_output, user_output


@click.command("remote")
@click.option("--refresh", is_flag=True, help="Ignore any configured remote and look it up again.")
@click.pass_obj
@cli_error_boundary
def remote_cmd(ctx: GitwrapContext, refresh: bool) -> None:
    """Print the remote used by other commands."""
    remote = ctx.client.refresh_remote() if refresh else ctx.client.get_remote()
    machine_output(remote)


@click.command("fetch")
@click.pass_obj
@cli_error_boundary
def fetch_cmd(ctx: GitwrapContext) -> None:
    """Fetch from the remote."""
    ctx.client.fetch()
    if not ctx.dry_run:
        user_output(f"Fetched {ctx.client.get_remote()}")
