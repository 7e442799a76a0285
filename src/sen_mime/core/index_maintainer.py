"""Idempotent search index maintenance for searchable attributes."""

import logging

from sen_mime.core.errors import IndexAlreadyExistsError, IndexNotFoundError
from sen_mime.core.indices.abc import IndexStore
from sen_mime.core.results import IndexOutcome
from sen_mime.core.types import AttributeSpec, AttributeValueType

logger = logging.getLogger(__name__)


def ensure_index(
    store: IndexStore, name: str, value_type: AttributeValueType, want_present: bool
) -> IndexOutcome:
    """Bring one attribute index to the wanted state.

    An index that is already present (or already absent) is reported as
    skipped. Store failures are reported as "failed"; nothing here raises.

    Args:
        store: Volume index store
        name: Attribute name the index is keyed by
        value_type: Declared attribute value type
        want_present: True to create the index, False to remove it

    Returns:
        IndexOutcome describing what happened
    """
    try:
        present = store.has_index(name)
    except (OSError, ValueError) as e:
        logger.warning("Failed to look up index %s: %s", name, e)
        return IndexOutcome(name, value_type, want_present, "failed", str(e))

    if want_present:
        if present:
            logger.info("Index %s already exists, skipping", name)
            return IndexOutcome(name, value_type, want_present, "skipped_exists")
        try:
            store.create_index(name, value_type)
        except IndexAlreadyExistsError:
            # Created by someone else between the check and the create
            logger.info("Index %s already exists, skipping", name)
            return IndexOutcome(name, value_type, want_present, "skipped_exists")
        except (OSError, ValueError) as e:
            logger.warning("Failed to create index %s: %s", name, e)
            return IndexOutcome(name, value_type, want_present, "failed", str(e))
        logger.info("Created index %s (%s)", name, value_type.type_name)
        return IndexOutcome(name, value_type, want_present, "created")

    if not present:
        logger.info("Index %s not found, skipping", name)
        return IndexOutcome(name, value_type, want_present, "skipped_missing")
    try:
        store.remove_index(name)
    except IndexNotFoundError:
        logger.info("Index %s not found, skipping", name)
        return IndexOutcome(name, value_type, want_present, "skipped_missing")
    except (OSError, ValueError) as e:
        logger.warning("Failed to remove index %s: %s", name, e)
        return IndexOutcome(name, value_type, want_present, "failed", str(e))
    logger.info("Removed index %s", name)
    return IndexOutcome(name, value_type, want_present, "removed")


def sync_attribute_indices(
    store: IndexStore, attributes: tuple[AttributeSpec, ...]
) -> list[IndexOutcome]:
    """Run ensure_index for every attribute that declares a searchable flag.

    Attributes without a declared flag are left alone. Each outcome is
    independent; a failure does not stop the loop.
    """
    return [
        ensure_index(store, spec.name, spec.value_type, spec.searchable)
        for spec in attributes
        if spec.searchable is not None
    ]
