import click

from gitwrap.cli.error_boundary import cli_error_boundary
from gitwrap.context import GitwrapContext
from gitwrap.output import user_output
from gitwrap.parsing import build_ref_path


@click.command("push")
@click.argument("source")
@click.argument("destination")
@click.pass_obj
@cli_error_boundary
def push_cmd(ctx: GitwrapContext, source: str, destination: str) -> None:
    """Force-push SOURCE to the fully qualified DESTINATION ref on the remote."""
    ctx.client.force_push(source, destination)
    if not ctx.dry_run:
        user_output(f"Pushed {source} to {destination}")


@click.command("push-hash")
@click.argument("commit_hash", metavar="HASH")
@click.argument("ref")
@click.option(
    "--type",
    "ref_type",
    default="heads",
    show_default=True,
    help="Reference category of REF.",
)
@click.pass_obj
@cli_error_boundary
def push_hash_cmd(ctx: GitwrapContext, commit_hash: str, ref: str, ref_type: str) -> None:
    """Force-push HASH to refs/<type>/REF on the remote."""
    ctx.client.force_push_hash_to_ref(commit_hash, ref, ref_type)
    if not ctx.dry_run:
        user_output(f"Pushed {commit_hash} to {build_ref_path(ref_type, ref)}")
