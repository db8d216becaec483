"""Exceptions raised by the documentation pipeline."""

from pathlib import Path


class DocumenterError(Exception):
    """Base class for fatal pipeline errors.

    Every error names the resource (file, folder or template) that caused it.
    """

    def __init__(self, message: str, resource: str | Path | None = None) -> None:
        """Store the message and the offending resource."""
        self.resource = str(resource) if resource is not None else None
        super().__init__(f"{message}: {resource}" if resource is not None else message)


class ConfigError(DocumenterError):
    """The configuration file is missing or malformed."""


class DiscoveryError(DocumenterError):
    """A metadata location folder could not be walked."""


class MetadataParseError(DocumenterError):
    """A descriptor file is not valid configuration metadata."""


class TemplateError(DocumenterError):
    """The template could not be read, compiled or rendered."""


class OutputWriteError(DocumenterError):
    """The output document could not be written."""
