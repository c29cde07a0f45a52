"""Commands that inspect commit history."""

import json

import click

from gitwrap.cli.error_boundary import cli_error_boundary
from gitwrap.context import GitwrapContext
from gitwrap.output import machine_output


@click.command("commits")
@click.argument("commit_range", nargs=-1)
@click.pass_obj
@cli_error_boundary
def commits_cmd(ctx: GitwrapContext, commit_range: tuple[str, ...]) -> None:
    """List commit hashes, newest first.

    COMMIT_RANGE is passed through to git log (e.g. main..feature).
    """
    for commit_hash in ctx.client.list_commits(*commit_range):
        machine_output(commit_hash)


@click.command("last-commit")
@click.argument("ref")
@click.pass_obj
@cli_error_boundary
def last_commit_cmd(ctx: GitwrapContext, ref: str) -> None:
    """Print the most recent commit reachable from REF."""
    machine_output(ctx.client.get_last_commit_on_ref(ref))


@click.command("message")
@click.argument("commit_hash", metavar="HASH")
@click.pass_obj
@cli_error_boundary
def message_cmd(ctx: GitwrapContext, commit_hash: str) -> None:
    """Print the full message of a commit."""
    machine_output(ctx.client.get_commit_message_body(commit_hash))


@click.command("date")
@click.argument("ref")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON object instead of plain text.")
@click.pass_obj
@cli_error_boundary
def date_cmd(ctx: GitwrapContext, ref: str, as_json: bool) -> None:
    """Print the commit date of REF in ISO 8601 form."""
    committed_at = ctx.client.get_reference_datetime(ref)
    if as_json:
        machine_output(json.dumps({"ref": ref, "committed_at": committed_at.isoformat()}))
    else:
        machine_output(committed_at.isoformat())
