"""Data model for a property ready to be rendered."""

from dataclasses import dataclass

from property_documenter.as_default_value import as_default_value
from property_documenter.item_metadata import ItemDeprecation, ItemMetadata


@dataclass(frozen=True)
class PrintableProperty:
    """A property whose default value is already in its final text form."""

    name: str
    description: str | None
    default_value: str
    deprecation: ItemDeprecation | None

    @classmethod
    def from_item(cls, item: ItemMetadata) -> "PrintableProperty":
        """Build the printable form of a property item."""
        return cls(
            name=item.name,
            description=item.description,
            default_value=as_default_value(item.default_value),
            deprecation=item.deprecation,
        )
