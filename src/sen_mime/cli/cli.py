import logging
import os

import click

from sen_mime.cli.commands.config import config_group
from sen_mime.cli.commands.delete import delete_cmd
from sen_mime.cli.commands.install import install_cmd
from sen_mime.cli.commands.list_cmd import list_cmd
from sen_mime.cli.commands.show import show_cmd
from sen_mime.cli.error_boundary import cli_error_boundary
from sen_mime.core.context import create_context

# Enable debug logging if SEN_MIME_DEBUG environment variable is set
if os.getenv("SEN_MIME_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="sen-mime")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context) -> None:
    """Install, remove and list MIME types in the SEN MIME database."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        raise SystemExit(1)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(install_cmd)
cli.add_command(delete_cmd)
cli.add_command(delete_cmd, name="uninstall")
cli.add_command(list_cmd)
cli.add_command(show_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `mime` console script."""
    cli()
