"""Show command: print one installed MIME type's record."""

import click

from sen_mime.cli.json_output import emit_record_json
from sen_mime.cli.output import error_output
from sen_mime.cli.rendering import print_record
from sen_mime.core.context import MimeContext
from sen_mime.core.operations import show_mime_type
from sen_mime.core.results import OperationFailure


@click.command("show")
@click.argument("mime_type")
@click.option("--json", "as_json", is_flag=True, help="Print the record as JSON.")
@click.pass_obj
def show_cmd(ctx: MimeContext, mime_type: str, as_json: bool) -> None:
    """Show the metadata installed for MIME_TYPE."""
    result = show_mime_type(ctx, mime_type)
    if isinstance(result, OperationFailure):
        error_output(f"failed to show MIME type {mime_type}: {result.message}")
        raise SystemExit(1)

    if as_json:
        emit_record_json(result.record)
    else:
        print_record(result.record)
