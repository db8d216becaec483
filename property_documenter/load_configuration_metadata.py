"""Logic for loading configuration metadata descriptor files."""

import json
import logging
from pathlib import Path
from typing import Any

from property_documenter.errors import MetadataParseError
from property_documenter.item_kind import is_property_kind
from property_documenter.item_metadata import ItemDeprecation, ItemMetadata
from property_documenter.iter_metadata_items import iter_metadata_items

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool)


def _optional_str(it: dict[str, Any], key: str) -> str | None:
    v = it.get(key)
    if v is None or isinstance(v, str):
        return v
    msg = f"'{key}' of '{it.get('name')}' must be a string"
    raise ValueError(msg)


def _default_value(it: dict[str, Any]) -> Any:
    v = it.get("defaultValue")
    if v is None or isinstance(v, _SCALARS):
        return v
    if isinstance(v, list) and all(x is None or isinstance(x, _SCALARS) for x in v):
        return tuple(v)
    msg = f"'defaultValue' of '{it.get('name')}' must be a scalar or an array of scalars"
    raise ValueError(msg)


def _deprecation(it: dict[str, Any], kind: str) -> ItemDeprecation | None:
    dep = it.get("deprecation")
    if isinstance(dep, dict):
        return ItemDeprecation(
            level=_optional_str(dep, "level"),
            reason=_optional_str(dep, "reason"),
            replacement=_optional_str(dep, "replacement"),
        )
    if dep is not None:
        msg = f"'deprecation' of '{it.get('name')}' must be an object"
        raise ValueError(msg)
    # Older processors only wrote a boolean flag
    if is_property_kind(kind) and it.get("deprecated") is True:
        return ItemDeprecation()
    return None


def _to_item(kind: str, it: Any, path: Path) -> ItemMetadata:
    if not isinstance(it, dict):
        msg = f"{kind} entries must be JSON objects"
        raise ValueError(msg)
    name = it.get("name")
    if not isinstance(name, str) or not name:
        msg = f"{kind} entry without a name"
        raise ValueError(msg)
    return ItemMetadata(
        name=name,
        kind=kind,
        description=_optional_str(it, "description"),
        default_value=_default_value(it),
        deprecation=_deprecation(it, kind),
        file=path,
    )


def load_configuration_metadata(path: Path) -> list[ItemMetadata]:
    """Parse one descriptor file into its groups and properties, in file order."""
    try:
        with path.open(encoding="utf-8") as f:
            doc = json.load(f)
        items = [_to_item(kind, it, path) for kind, it in iter_metadata_items(doc)]
    except (OSError, ValueError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors
        msg = f"Error parsing spring property metadata json file ({e})"
        raise MetadataParseError(msg, path) from e
    logger.debug("Parsed %d item(s) from %s", len(items), path)
    return items
