"""Logic for merging the items of every descriptor file into rendering views."""

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain

from property_documenter.group_properties_by_namespace import (
    group_properties_by_namespace,
)
from property_documenter.item_metadata import ItemMetadata
from property_documenter.printable_property import PrintableProperty
from property_documenter.top_level_groups import top_level_groups


@dataclass(frozen=True)
class AggregatedMetadata:
    """Root groups and namespace buckets derived from all descriptor files."""

    groups: list[ItemMetadata]
    properties_by_namespace: dict[str, list[PrintableProperty]]


def aggregate_metadata(item_lists: Iterable[list[ItemMetadata]]) -> AggregatedMetadata:
    """Concatenate item lists in parse order and derive both views."""
    items = list(chain.from_iterable(item_lists))
    return AggregatedMetadata(
        groups=top_level_groups(items),
        properties_by_namespace=group_properties_by_namespace(items),
    )
