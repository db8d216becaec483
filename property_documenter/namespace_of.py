"""Utility for determining the namespace of a property."""


def namespace_of(name: str) -> str:
    """Return the first dot segment of a dotted property name."""
    # "server.ssl.enabled" -> "server"; "debug" -> "debug"
    return name.split(".", 1)[0]
