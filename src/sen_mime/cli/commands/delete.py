"""Delete command: remove a MIME type from the registry."""

import click

from sen_mime.cli.output import error_output, user_output
from sen_mime.core.context import MimeContext
from sen_mime.core.operations import delete_mime_type
from sen_mime.core.results import OperationFailure


@click.command("delete")
@click.argument("mime_type")
@click.pass_obj
def delete_cmd(ctx: MimeContext, mime_type: str) -> None:
    """Remove MIME_TYPE and all of its metadata.

    Deleting a type that is not installed only prints a notice.
    """
    result = delete_mime_type(ctx, mime_type)
    if isinstance(result, OperationFailure):
        error_output(f"failed to delete MIME type {mime_type}: {result.message}")
        raise SystemExit(1)

    if not result.was_installed:
        user_output(f"MIME type {mime_type} is not installed, skipping...")
    user_output(f"successfully removed MIME type {mime_type}.")
