"""Generate Markdown reference docs from Spring Boot configuration metadata."""

__version__ = "0.1.0"
