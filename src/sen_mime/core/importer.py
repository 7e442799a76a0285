"""Install MIME types from resource containers.

The import sequence for one container:

1. Open the container and read the required type string
2. Validate the type and install it if the registry does not have it yet
   (an installed type is updated in place)
3. Read and set the required short description
4. Set each optional field that is present; a failed optional field is
   recorded and, under the "continue" policy, does not stop the import
5. If the attribute schema was set, create or remove the search index of
   every attribute that declares a searchable flag

Steps 1-3 are fatal on failure. Index maintenance never is.
"""

import logging
from pathlib import Path

from sen_mime.core.context import MimeContext
from sen_mime.core.errors import (
    ContainerUnreadableError,
    InvalidFieldValueError,
    MalformedContainerError,
    MalformedFieldError,
    MimeTypeNotInstalledError,
    RegistryError,
)
from sen_mime.core.fields import (
    FIELD_SPECS,
    OPTIONAL_FIELDS,
    FieldKind,
    FieldValue,
    read_field,
)
from sen_mime.core.global_config import OptionalFieldPolicy
from sen_mime.core.index_maintainer import sync_attribute_indices
from sen_mime.core.resources.abc import ResourceContainer
from sen_mime.core.results import (
    ErrorType,
    FieldOutcome,
    IndexOutcome,
    InstallSuccess,
    OperationFailure,
)
from sen_mime.core.types import AttributeSpec
from sen_mime.core.validator import validate_type

logger = logging.getLogger(__name__)


def _read_required_string(
    container: ResourceContainer, kind: FieldKind, target: str
) -> str | OperationFailure:
    spec = FIELD_SPECS[kind]
    try:
        value = read_field(container, kind)
    except MalformedFieldError as e:
        return OperationFailure(
            success=False,
            error_type="missing_required_field",
            message=f"malformed {spec.label} resource {spec.resource_name}: {e}",
            target=target,
        )
    if not isinstance(value, str):
        return OperationFailure(
            success=False,
            error_type="missing_required_field",
            message=f"missing required {spec.label} resource {spec.resource_name}",
            target=target,
        )
    return value


def _install_if_needed(ctx: MimeContext, mime_type: str) -> bool | OperationFailure:
    """Install mime_type unless present. Returns True if it was already installed."""
    status = validate_type(ctx.registry, mime_type)
    if not status.valid:
        return OperationFailure(
            success=False,
            error_type="invalid_type",
            message=f"{mime_type} is not a valid MIME type",
            target=mime_type,
        )
    if status.installed:
        logger.info("MIME type %s is already installed, updating", mime_type)
        return True

    try:
        ctx.registry.install(mime_type)
    except (RegistryError, OSError) as e:
        return OperationFailure(
            success=False,
            error_type="install_error",
            message=f"error installing MIME type {mime_type}: {e}",
            target=mime_type,
        )
    logger.info("Installed MIME type %s", mime_type)
    return False


def _set_field(
    ctx: MimeContext, mime_type: str, kind: FieldKind, value: FieldValue
) -> tuple[ErrorType, str] | None:
    """Set one field. Returns (error_type, message) on failure, None on success."""
    try:
        ctx.registry.set_field(mime_type, kind, value)
    except MimeTypeNotInstalledError as e:
        return "not_installed", str(e)
    except InvalidFieldValueError as e:
        return "invalid_value", str(e)
    except (RegistryError, OSError) as e:
        return "registry_error", str(e)
    return None


def _apply_optional_field(
    ctx: MimeContext, container: ResourceContainer, mime_type: str, kind: FieldKind
) -> tuple[FieldOutcome, FieldValue | None]:
    label = FIELD_SPECS[kind].label
    try:
        value = read_field(container, kind)
    except MalformedFieldError as e:
        logger.warning("Malformed %s resource for %s: %s", label, mime_type, e)
        return FieldOutcome(kind, "failed", "invalid_value", f"malformed resource: {e}"), None

    if value is None:
        logger.debug("No %s resource for %s", label, mime_type)
        return FieldOutcome(kind, "absent"), None

    error = _set_field(ctx, mime_type, kind, value)
    if error is not None:
        error_type, message = error
        logger.warning("Could not set %s for %s: %s", label, mime_type, message)
        return FieldOutcome(kind, "failed", error_type, message), None

    logger.info("Set %s for %s", label, mime_type)
    return FieldOutcome(kind, "set"), value


def install_from_resource(
    ctx: MimeContext, path: Path, policy: OptionalFieldPolicy | None = None
) -> InstallSuccess | OperationFailure:
    """Install or update the MIME type described by a resource container.

    Args:
        ctx: Application context
        path: Resource container to import; relative paths resolve against ctx.cwd
        policy: Optional field failure policy; defaults to the configured one

    Returns:
        InstallSuccess with per-field and per-index outcomes, or
        OperationFailure naming the first fatal error
    """
    effective_policy = policy if policy is not None else ctx.global_config.optional_field_policy
    if not path.is_absolute():
        path = ctx.cwd / path
    target = str(path)

    try:
        container = ctx.resources.open_container(path)
    except ContainerUnreadableError as e:
        return OperationFailure(
            success=False,
            error_type="container_unreadable",
            message=f"cannot open resource container {e}",
            target=target,
        )
    except MalformedContainerError as e:
        return OperationFailure(
            success=False,
            error_type="malformed_container",
            message=f"error initializing resources from {e}",
            target=target,
        )

    mime_type = _read_required_string(container, FieldKind.TYPE, target)
    if isinstance(mime_type, OperationFailure):
        return mime_type

    updated = _install_if_needed(ctx, mime_type)
    if isinstance(updated, OperationFailure):
        return updated

    short_description = _read_required_string(container, FieldKind.SHORT_DESCRIPTION, mime_type)
    if isinstance(short_description, OperationFailure):
        return short_description

    error = _set_field(ctx, mime_type, FieldKind.SHORT_DESCRIPTION, short_description)
    if error is not None:
        error_type, message = error
        return OperationFailure(
            success=False,
            error_type=error_type,
            message=f"cannot set short description: {message}",
            target=mime_type,
        )

    outcomes: list[FieldOutcome] = []
    attributes: tuple[AttributeSpec, ...] | None = None
    for kind in OPTIONAL_FIELDS:
        outcome, value = _apply_optional_field(ctx, container, mime_type, kind)
        outcomes.append(outcome)
        if outcome.status == "failed" and effective_policy == "abort":
            return OperationFailure(
                success=False,
                error_type=outcome.error_type or "invalid_value",
                message=f"cannot set {FIELD_SPECS[kind].label}: {outcome.message}",
                target=mime_type,
            )
        if kind is FieldKind.ATTR_INFO and isinstance(value, tuple):
            attributes = tuple(spec for spec in value if isinstance(spec, AttributeSpec))

    indices: list[IndexOutcome] = []
    if attributes is not None:
        indices = sync_attribute_indices(ctx.indices, attributes)

    return InstallSuccess(
        success=True,
        mime_type=mime_type,
        updated=updated,
        fields=outcomes,
        indices=indices,
    )


def install_bare_type(ctx: MimeContext, mime_type: str) -> InstallSuccess | OperationFailure:
    """Install a MIME type by name, without any metadata."""
    updated = _install_if_needed(ctx, mime_type)
    if isinstance(updated, OperationFailure):
        return updated
    return InstallSuccess(success=True, mime_type=mime_type, updated=updated)
