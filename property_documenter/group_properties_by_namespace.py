"""Logic for bucketing properties under their top-level namespace."""

import logging
from collections.abc import Iterable
from pathlib import Path

from property_documenter.item_kind import is_property_kind
from property_documenter.item_metadata import ItemMetadata
from property_documenter.namespace_of import namespace_of
from property_documenter.printable_property import PrintableProperty

logger = logging.getLogger(__name__)


def group_properties_by_namespace(
    items: Iterable[ItemMetadata],
) -> dict[str, list[PrintableProperty]]:
    """Group properties by the first segment of their name in one pass.

    Both the namespaces and the properties inside each namespace keep their
    first-occurrence order. Duplicate property names are kept as separate rows.
    A namespace exists whether or not a matching group was declared.
    """
    by_namespace: dict[str, list[PrintableProperty]] = {}
    first_seen: dict[str, Path] = {}
    for it in items:
        if not is_property_kind(it.kind):
            continue
        if it.name in first_seen:
            logger.info(
                "Property %s from %s is also declared in %s; keeping both",
                it.name,
                it.file,
                first_seen[it.name],
            )
        else:
            first_seen[it.name] = it.file
        by_namespace.setdefault(namespace_of(it.name), []).append(
            PrintableProperty.from_item(it)
        )
    logger.debug(
        "Grouped properties into %d namespace(s): %s",
        len(by_namespace),
        ", ".join(by_namespace),
    )
    return by_namespace
