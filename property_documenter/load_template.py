"""Logic for choosing the template source."""

import logging
from pathlib import Path

from property_documenter.default_template import (
    DEFAULT_MD_TEMPLATE,
    DEFAULT_TEMPLATE_VERSION,
)
from property_documenter.errors import TemplateError

logger = logging.getLogger(__name__)


def load_template(path: Path | None = None) -> tuple[str, str]:
    """Return ``(template_name, template_source)``.

    Without a path the built-in default template is used.
    """
    if path is None:
        logger.debug("Using default template v%s", DEFAULT_TEMPLATE_VERSION)
        return f"default-v{DEFAULT_TEMPLATE_VERSION}", DEFAULT_MD_TEMPLATE
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = "Error reading template file"
        raise TemplateError(msg, path) from e
    logger.debug("Using template file %s", path)
    return str(path), source
