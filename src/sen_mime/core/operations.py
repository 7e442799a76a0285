"""Delete, list and show operations on the MIME registry."""

import logging

from sen_mime.core.context import MimeContext
from sen_mime.core.errors import MimeTypeNotInstalledError, RegistryError
from sen_mime.core.results import DeleteSuccess, OperationFailure, RecordLookup, TypeListing
from sen_mime.core.validator import validate_type

logger = logging.getLogger(__name__)

# Supertype categories shown by `mime list`, with their headings
LISTED_SUPERTYPES: tuple[tuple[str, str], ...] = (
    ("entity", "entities"),
    ("relation", "relations"),
)


def delete_mime_type(ctx: MimeContext, mime_type: str) -> DeleteSuccess | OperationFailure:
    """Delete a MIME type.

    Deleting a type that is not installed succeeds with was_installed=False.
    """
    status = validate_type(ctx.registry, mime_type)
    if not status.valid:
        return OperationFailure(
            success=False,
            error_type="invalid_type",
            message=f"{mime_type} is not a valid MIME type",
            target=mime_type,
        )
    if not status.installed:
        logger.warning("MIME type %s is not installed, skipping", mime_type)
        return DeleteSuccess(success=True, mime_type=mime_type, was_installed=False)

    try:
        ctx.registry.delete(mime_type)
    except MimeTypeNotInstalledError:
        # Removed by another process after the check
        logger.warning("MIME type %s is not installed, skipping", mime_type)
        return DeleteSuccess(success=True, mime_type=mime_type, was_installed=False)
    except (RegistryError, OSError) as e:
        return OperationFailure(
            success=False,
            error_type="registry_error",
            message=str(e),
            target=mime_type,
        )
    logger.info("Deleted MIME type %s", mime_type)
    return DeleteSuccess(success=True, mime_type=mime_type, was_installed=True)


def list_installed_types(ctx: MimeContext, supertype: str) -> TypeListing | OperationFailure:
    try:
        types = ctx.registry.installed_types(supertype)
    except (RegistryError, OSError) as e:
        return OperationFailure(
            success=False,
            error_type="registry_error",
            message=str(e),
            target=supertype,
        )
    return TypeListing(success=True, supertype=supertype, types=types)


def show_mime_type(ctx: MimeContext, mime_type: str) -> RecordLookup | OperationFailure:
    status = validate_type(ctx.registry, mime_type)
    if not status.valid:
        return OperationFailure(
            success=False,
            error_type="invalid_type",
            message=f"{mime_type} is not a valid MIME type",
            target=mime_type,
        )
    try:
        record = ctx.registry.get_record(mime_type)
    except (RegistryError, OSError) as e:
        return OperationFailure(
            success=False,
            error_type="registry_error",
            message=str(e),
            target=mime_type,
        )
    if record is None:
        return OperationFailure(
            success=False,
            error_type="not_installed",
            message=f"MIME type {mime_type} is not installed",
            target=mime_type,
        )
    return RecordLookup(success=True, record=record)
