"""Config commands: inspect and initialize the global configuration."""

import click

from sen_mime.cli.ensure import Ensure
from sen_mime.cli.error_boundary import cli_error_boundary
from sen_mime.cli.output import user_output
from sen_mime.core.context import MimeContext
from sen_mime.core.global_config import GlobalConfig


@click.group("config")
def config_group() -> None:
    """Manage sen-mime configuration."""


@config_group.command("show")
@click.pass_obj
def config_show(ctx: MimeContext) -> None:
    """Print the effective configuration, including environment overrides."""
    config = ctx.global_config
    source = ctx.config_ops.path() if ctx.config_ops.exists() else "defaults"
    user_output(f"# source: {source}")
    user_output(f"mime_db_root = {config.mime_db_root}")
    user_output(f"index_root = {config.index_root}")
    user_output(f"optional_field_policy = {config.optional_field_policy}")


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_obj
@cli_error_boundary
def config_init(ctx: MimeContext, force: bool) -> None:
    """Write a config file with default settings."""
    Ensure.invariant(
        force or not ctx.config_ops.exists(),
        f"Config already exists at {ctx.config_ops.path()} (use --force to overwrite)",
    )
    ctx.config_ops.save(GlobalConfig.defaults())
    user_output(f"Wrote {ctx.config_ops.path()}")
