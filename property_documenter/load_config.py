"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from property_documenter.deep_merge import deep_merge
from property_documenter.errors import ConfigError
from property_documenter.find_metadata_files import DEFAULT_DESCRIPTOR_PATH

DEFAULT_CONFIG: dict[str, Any] = {
    "metadata_location_folders": ["./"],
    "output": None,
    "template": None,
    "descriptor_path": DEFAULT_DESCRIPTOR_PATH,
    "log_level": "INFO",
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if not path:
        return config
    p = Path(path)
    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = "Error loading configuration file"
        raise ConfigError(msg, p) from e
    if not isinstance(user_config, dict):
        msg = "Configuration file must contain a mapping"
        raise ConfigError(msg, p)
    unknown = sorted(set(user_config) - set(DEFAULT_CONFIG))
    if unknown:
        msg = f"Unknown configuration key(s) {', '.join(unknown)}"
        raise ConfigError(msg, p)
    folders = user_config.get(
        "metadata_location_folders", DEFAULT_CONFIG["metadata_location_folders"]
    )
    if isinstance(folders, str):
        user_config["metadata_location_folders"] = [folders]
    elif not isinstance(folders, list) or not folders or not all(
        isinstance(f, str) and f for f in folders
    ):
        msg = "'metadata_location_folders' must be a folder or a list of folders"
        raise ConfigError(msg, p)
    for key in ("output", "template"):
        if not isinstance(user_config.get(key), (str, type(None))):
            msg = f"'{key}' must be a file path"
            raise ConfigError(msg, p)
    for key in ("descriptor_path", "log_level"):
        if key in user_config and not isinstance(user_config[key], str):
            msg = f"'{key}' must be a string"
            raise ConfigError(msg, p)
    return deep_merge(config, user_config)
