"""Logic for selecting the root configuration groups."""

from collections.abc import Iterable

from property_documenter.item_kind import is_group_kind
from property_documenter.item_metadata import ItemMetadata


def top_level_groups(items: Iterable[ItemMetadata]) -> list[ItemMetadata]:
    """Return groups without a dot in their name, in encounter order.

    Groups declared by several descriptor files are all kept.
    """
    return [it for it in items if is_group_kind(it.kind) and "." not in it.name]
