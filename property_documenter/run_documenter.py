"""Orchestration logic for documenting configuration properties."""

import argparse
import logging
from pathlib import Path

from property_documenter.aggregate_metadata import aggregate_metadata
from property_documenter.find_metadata_files import find_metadata_files
from property_documenter.load_configuration_metadata import (
    load_configuration_metadata,
)
from property_documenter.load_template import load_template
from property_documenter.render_context import build_render_context
from property_documenter.render_document import render_document
from property_documenter.write_document import write_document

logger = logging.getLogger(__name__)


def run_documenter(args: argparse.Namespace) -> int:
    """Execute the full pipeline: discover, parse, aggregate, render, write.

    Any ``DocumenterError`` propagates to the caller; nothing is written
    unless every step before the write succeeded.
    """
    roots = [Path(p) for p in args.metadata_location_folders]
    files = find_metadata_files(roots, args.descriptor_path)
    if not files:
        print("No configuration metadata file(s) found. Bye bye.")
        return 0
    print(f"Found file(s): {', '.join(str(f) for f in files)}.")

    item_lists = [load_configuration_metadata(f) for f in files]
    aggregated = aggregate_metadata(item_lists)
    logger.info(
        "Collected %d top-level group(s) and %d namespace(s)",
        len(aggregated.groups),
        len(aggregated.properties_by_namespace),
    )

    template_name, template_source = load_template(args.template)
    text = render_document(
        build_render_context(aggregated), template_source, template_name
    )

    print(f"Generating documentation file : {args.output} ...")
    write_document(args.output, text)
    print("Generated documentation file.")
    return 0
