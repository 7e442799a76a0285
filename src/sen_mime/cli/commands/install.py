"""Install command: import a MIME type from a resource container."""

from pathlib import Path

import click

from sen_mime.cli.ensure import Ensure
from sen_mime.cli.output import error_output, user_output
from sen_mime.core.context import MimeContext
from sen_mime.core.fields import FIELD_SPECS
from sen_mime.core.importer import install_bare_type, install_from_resource
from sen_mime.core.results import IndexOutcome, InstallSuccess, OperationFailure


def _index_line(outcome: IndexOutcome) -> str:
    if outcome.want_present:
        prefix = f"adding attribute index {outcome.attribute} ({outcome.value_type.type_name})..."
    else:
        prefix = f"removing attribute index {outcome.attribute}..."

    if outcome.status in ("created", "removed"):
        return f"{prefix} OK"
    if outcome.status == "skipped_exists":
        return f"{prefix} already exists, skipped"
    if outcome.status == "skipped_missing":
        return f"{prefix} not found, skipped"
    return f"{prefix} FAILED: {outcome.message}"


def _report_success(result: InstallSuccess) -> None:
    if result.updated:
        user_output(f"MIME type {result.mime_type} is already installed, updating...")

    for outcome in result.failed_fields:
        label = FIELD_SPECS[outcome.field].label
        error_output(f"warning: could not set {label} for {result.mime_type}: {outcome.message}")

    for index_outcome in result.indices:
        line = _index_line(index_outcome)
        if index_outcome.status == "failed":
            error_output(line)
        else:
            user_output(line)

    user_output(f"successfully installed MIME type {result.mime_type}.")


@click.command("install")
@click.argument("resource_path", required=False, type=click.Path(path_type=Path))
@click.option(
    "--type",
    "mime_type",
    help="Install a bare MIME type by name instead of importing a resource container.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Abort on the first optional field that cannot be set.",
)
@click.pass_obj
def install_cmd(
    ctx: MimeContext, resource_path: Path | None, mime_type: str | None, strict: bool
) -> None:
    """Install or update a MIME type from RESOURCE_PATH.

    The type, its descriptions, preferred app, sniffer rule, extensions,
    attribute schema and icon are read from the container's META:* resources.
    Searchable attributes get a volume search index.
    """
    Ensure.invariant(
        resource_path is None or mime_type is None,
        "Pass either a resource path or --type, not both",
    )

    result: InstallSuccess | OperationFailure
    if mime_type is not None:
        target = mime_type
        result = install_bare_type(ctx, mime_type)
    else:
        path = Ensure.not_none(resource_path, "Missing resource path (or use --type)")
        target = str(path)
        result = install_from_resource(ctx, path, policy="abort" if strict else None)

    if isinstance(result, OperationFailure):
        error_output(f"failed to install MIME type {target}: {result.message}")
        raise SystemExit(1)

    _report_success(result)
