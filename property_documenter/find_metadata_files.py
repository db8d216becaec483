"""Logic for discovering configuration metadata descriptor files."""

import logging
import os
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from property_documenter.errors import DiscoveryError

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTOR_PATH = "META-INF/spring-configuration-metadata.json"


def _descriptor_parts(descriptor_path: str) -> tuple[str, ...]:
    parts = tuple(p for p in PurePosixPath(descriptor_path).parts if p not in ("/", "."))
    if not parts:
        msg = "Descriptor path must name at least one path segment"
        raise DiscoveryError(msg, descriptor_path)
    return parts


def _matches(path: Path, suffix: tuple[str, ...]) -> bool:
    """Match whole trailing path segments, not characters."""
    return path.parts[-len(suffix) :] == suffix


def _walk(root: Path, suffix: tuple[str, ...]) -> list[Path]:
    def on_error(err: OSError) -> None:
        msg = "Error reading configuration metadata folder"
        raise DiscoveryError(msg, err.filename or root) from err

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        # Sorted in place so the walk order is reproducible
        dirnames.sort()
        base = Path(dirpath)
        for filename in sorted(filenames):
            candidate = base / filename
            if _matches(candidate, suffix):
                found.append(candidate)
    return found


def find_metadata_files(
    roots: Sequence[Path],
    descriptor_path: str = DEFAULT_DESCRIPTOR_PATH,
) -> list[Path]:
    """Find every descriptor file below the given roots, in discovery order.

    An empty result is not an error; the caller decides what to do with it.
    """
    suffix = _descriptor_parts(descriptor_path)
    files: list[Path] = []
    for root in roots:
        root = Path(root)
        if root.is_file():
            if _matches(root, suffix):
                files.append(root)
            continue
        if not root.is_dir():
            msg = "Configuration metadata folder does not exist"
            raise DiscoveryError(msg, root)
        matches = _walk(root, suffix)
        logger.debug("Found %d descriptor file(s) under %s", len(matches), root)
        files.extend(matches)
    return files
