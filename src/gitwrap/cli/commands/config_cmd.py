import click

from gitwrap.cli.error_boundary import cli_error_boundary
from gitwrap.config import CONFIG_KEYS, apply_config_value
from gitwrap.context import GitwrapContext
from gitwrap.output import machine_output, user_output


@click.group("config")
def config_group() -> None:
    """Show or change global configuration."""
    pass


@config_group.command("show")
@click.pass_obj
def show_cmd(ctx: GitwrapContext) -> None:
    """Print the effective configuration."""
    config = ctx.config
    machine_output(f"git_executable={config.git_executable}")
    machine_output(f"remote={config.remote or ''}")
    machine_output(f"debug={str(config.debug).lower()}")


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@cli_error_boundary
def set_cmd(ctx: GitwrapContext, key: str, value: str) -> None:
    """Set KEY to VALUE in the config file."""
    updated = apply_config_value(ctx.config, key, value)
    if updated is None:
        user_output(
            click.style("Error: ", fg="red")
            + f"Unknown config key '{key}'. Valid keys: {', '.join(CONFIG_KEYS)}"
        )
        raise SystemExit(1)

    ctx.config_store.save(updated)
    user_output(f"Set {key} in {ctx.config_store.path()}")
