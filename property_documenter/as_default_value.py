"""Logic for converting default values to their printable form."""

import json


def _scalar_text(v: object) -> str:
    if v is None:
        return ""
    if isinstance(v, str):
        return v
    # bool/int/float as they appear in the JSON source
    return json.dumps(v)


def as_default_value(v: object) -> str:
    """Convert a default value to a string, joining lists with commas."""
    if isinstance(v, (list, tuple)):
        return ",".join(_scalar_text(x) for x in v)
    return _scalar_text(v)
