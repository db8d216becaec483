"""Data models for configuration metadata items."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

Scalar = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class ItemDeprecation:
    """Deprecation details of a property. Presence alone marks it deprecated."""

    level: str | None = None
    reason: str | None = None
    replacement: str | None = None

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class ItemMetadata:
    """A group or property read from a descriptor file."""

    name: str
    kind: str  # group/property
    description: str | None = None
    default_value: Scalar | tuple[Scalar, ...] = None
    deprecation: ItemDeprecation | None = None
    file: Path = field(default_factory=Path, compare=False)
