"""Predicates for configuration metadata item kinds."""

GROUP = "group"
PROPERTY = "property"
HINT = "hint"


def is_group_kind(kind: str) -> bool:
    """Return True when the kind describes a group."""
    return kind.strip().lower() == GROUP


def is_property_kind(kind: str) -> bool:
    """Return True when the kind describes a property."""
    return kind.strip().lower() == PROPERTY


def is_hint_kind(kind: str) -> bool:
    """Return True when the kind describes a value hint."""
    return kind.strip().lower() == HINT
