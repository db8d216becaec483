"""Typed context handed to the document template."""

from dataclasses import dataclass
from typing import Any

from property_documenter.aggregate_metadata import AggregatedMetadata
from property_documenter.printable_property import PrintableProperty


@dataclass(frozen=True)
class GroupEntry:
    """A root group listed in the document index."""

    name: str
    description: str | None


@dataclass(frozen=True)
class NamespaceSection:
    """The properties of one namespace, in first-occurrence order."""

    key: str
    value: list[PrintableProperty]


@dataclass(frozen=True)
class RenderContext:
    """Everything a template can reference."""

    groups: list[GroupEntry]
    properties: list[NamespaceSection]

    def template_params(self) -> dict[str, Any]:
        """Return the parameters exposed to the template.

        Shape::

            groups:     [{name, description}]
            properties: [{key, value: [{name, description, defaultValue, deprecation}]}]
        """
        return {
            "groups": [
                {"name": g.name, "description": g.description} for g in self.groups
            ],
            "properties": [
                {
                    "key": section.key,
                    "value": [
                        {
                            "name": p.name,
                            "description": p.description,
                            "defaultValue": p.default_value,
                            "deprecation": p.deprecation,
                        }
                        for p in section.value
                    ],
                }
                for section in self.properties
            ],
        }


def build_render_context(aggregated: AggregatedMetadata) -> RenderContext:
    """Shape the aggregated views into a rendering context."""
    return RenderContext(
        groups=[GroupEntry(g.name, g.description) for g in aggregated.groups],
        properties=[
            NamespaceSection(key, list(props))
            for key, props in aggregated.properties_by_namespace.items()
        ],
    )
