"""Utility for iterating over the raw items of a descriptor document."""

from collections.abc import Iterable
from typing import Any

from property_documenter.item_kind import GROUP, PROPERTY, is_hint_kind

ITEM_TYPE_KEY = "itemType"


def iter_metadata_items(doc: Any) -> Iterable[tuple[str, Any]]:
    """Yield ``(kind, raw_item)`` pairs in document order.

    Accepts the standard ``{"groups": [...], "properties": [...], "hints": [...]}``
    layout as well as a flat array of items tagged with ``itemType``.
    Hints are never yielded.
    """
    if isinstance(doc, dict):
        for key, kind in (("groups", GROUP), ("properties", PROPERTY)):
            section = doc.get(key) or []
            if not isinstance(section, list):
                msg = f"'{key}' must be an array"
                raise ValueError(msg)
            for it in section:
                yield kind, it
        return
    if isinstance(doc, list):
        for it in doc:
            kind = PROPERTY
            if isinstance(it, dict):
                kind = str(it.get(ITEM_TYPE_KEY) or PROPERTY).strip().lower()
            if is_hint_kind(kind):
                continue
            if kind not in (GROUP, PROPERTY):
                msg = f"unknown item type '{kind}'"
                raise ValueError(msg)
            yield kind, it
        return
    msg = "descriptor must be a JSON object or array"
    raise ValueError(msg)
