import click

from gitwrap.cli.error_boundary import cli_error_boundary
from gitwrap.context import GitwrapContext
from gitwrap.output import machine_output


@click.command("refs")
@click.option(
    "--type",
    "ref_type",
    default="heads",
    show_default=True,
    help="Reference category to list (heads, tags, ...).",
)
@click.pass_obj
@cli_error_boundary
def refs_cmd(ctx: GitwrapContext, ref_type: str) -> None:
    """List reference names on the remote, one per line."""
    for name in ctx.client.list_remote_refs(ref_type):
        machine_output(name)


@click.command("branch")
@click.pass_obj
@cli_error_boundary
def branch_cmd(ctx: GitwrapContext) -> None:
    """Print the currently checked-out branch."""
    machine_output(ctx.client.get_current_branch())
