"""Command line entry point for the property documenter."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from property_documenter import __version__
from property_documenter.errors import ConfigError, DocumenterError
from property_documenter.load_config import load_config
from property_documenter.run_documenter import run_documenter

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        prog="spring-property-documenter",
        description="Document spring boot properties based on property metadata",
    )
    ap.add_argument(
        "-m",
        "--metadata-location-folders",
        action="append",
        type=Path,
        help=(
            "Folder(s) containing spring boot configuration metadata files "
            "(repeatable, defaults to current folder)"
        ),
    )
    ap.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Markdown file output filename",
    )
    ap.add_argument(
        "-t",
        "--template",
        type=Path,
        help="Jinja2 template file used instead of the built-in Markdown template",
    )
    ap.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    ap.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return ap


def resolve_settings(
    ap: argparse.ArgumentParser, args: argparse.Namespace
) -> argparse.Namespace:
    """Merge the configuration file with command line flags (flags win)."""
    config = load_config(args.config)
    folders = args.metadata_location_folders or config["metadata_location_folders"]
    output = args.output or config["output"]
    if not output:
        ap.error("the following arguments are required: -o/--output")
    template = args.template or config["template"]
    log_level = "DEBUG" if args.verbose else str(config["log_level"]).upper()
    if log_level not in LOG_LEVELS:
        msg = f"Unknown log level '{log_level}' in configuration file"
        raise ConfigError(msg, args.config)
    return argparse.Namespace(
        metadata_location_folders=[Path(p) for p in folders],
        output=Path(output),
        template=Path(template) if template else None,
        descriptor_path=config["descriptor_path"],
        log_level=log_level,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the documenter and return the process exit code."""
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        settings = resolve_settings(ap, args)
        logging.basicConfig(
            level=settings.log_level, format="%(levelname)s: %(message)s"
        )
        return run_documenter(settings)
    except DocumenterError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
