"""List command: show installed entity and relation types."""

import click

from sen_mime.cli.output import error_output, user_output
from sen_mime.cli.rendering import render_type_listing
from sen_mime.core.context import MimeContext
from sen_mime.core.operations import LISTED_SUPERTYPES, list_installed_types
from sen_mime.core.results import OperationFailure


@click.command("list")
@click.pass_obj
def list_cmd(ctx: MimeContext) -> None:
    """List installed entities and relations."""
    failed = False
    for supertype, heading in LISTED_SUPERTYPES:
        result = list_installed_types(ctx, supertype)
        types: list[str] = []
        if isinstance(result, OperationFailure):
            error_output(f"failed to query MIME type DB: {result.message}")
            failed = True
        else:
            types = result.types

        user_output(f"installed {heading}:")
        user_output(render_type_listing(types))

    if failed:
        raise SystemExit(1)
