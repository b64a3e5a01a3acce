"""Command line driver: load a blueprint directory, summarise it, export it."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from sebp.config import load_config
from sebp.data.errors import BlueprintError, BlueprintNotFoundError
from sebp.logging_config import setup_logging
from sebp.presentation.cli.render import render_summary
from sebp.services import BlueprintService, blank_strings_to_none, export_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sebp",
        description="Load a Space Engineers blueprint directory and print a summary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sebp "Blueprints/Atalanta Class Shuttle"
  sebp "Blueprints/Atalanta Class Shuttle" --json exports --out rebuilt
        """,
    )
    parser.add_argument("directory", type=Path, help="Blueprint directory containing bp.sbc")
    parser.add_argument("--json", dest="json_dir", type=Path, help="Write a JSON export into this directory")
    parser.add_argument("--out", dest="out_dir", type=Path, help="Re-encode the blueprint into this directory")
    parser.add_argument("--config", type=Path, help="Settings file (defaults to the per-user config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the driver and return a process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    settings = load_config(args.config)
    service = BlueprintService(settings=settings)

    try:
        blueprint_file = service.deserialize(args.directory)
    except BlueprintNotFoundError as exc:
        print(f"ERROR: {exc}")
        return 1
    except BlueprintError as exc:
        print(f"ERROR: Unable to load blueprint: {exc}")
        return 1

    render_summary(blueprint_file)

    try:
        if args.out_dir is not None:
            document_path = service.serialize(blueprint_file, args.out_dir)
            print(f"\nBlueprint saved to: {document_path}")
        if args.json_dir is not None:
            blank_strings_to_none(blueprint_file)
            json_path = export_json(blueprint_file, args.json_dir)
            print(f"\nJSON saved to: {json_path}")
    except BlueprintError as exc:
        logger.debug("Write failed", exc_info=True)
        print(f"ERROR: {exc}")
        return 1
    return 0
