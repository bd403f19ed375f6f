"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from specimen_media import __version__
from specimen_media.config import get_settings
from specimen_media.errors import SpecimenMediaError
from specimen_media.flows.catalog import filter_catalog
from specimen_media.flows.images import fetch_images


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="specimen-media",
        description="Filter occurrence exports by catalog number and download specimen images",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'filter' command - Catalog Filter
    filter_parser = subparsers.add_parser(
        "filter",
        help="Write the occurrence rows matching a catalog number list",
        epilog="Example: specimen-media filter extracted/occurrences.csv catalogNumbers.txt out.csv",
    )
    filter_parser.add_argument(
        "occurrences",
        nargs="?",
        type=Path,
        default=None,
        help="Occurrences table (default: <extracted_dir>/occurrences.csv)",
    )
    filter_parser.add_argument(
        "catalog_file",
        nargs="?",
        type=Path,
        default=None,
        help="File of catalog numbers, one per line (default: catalogNumbers.txt)",
    )
    filter_parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        default=None,
        help="Filtered table to write (default: filtered_occurrences.csv)",
    )

    # 'images' command - Image Fetcher
    images_parser = subparsers.add_parser(
        "images",
        help="Download the images of each listed catalog number",
        epilog="Example: specimen-media images catalogNumbers.txt ./extracted ./images",
    )
    images_parser.add_argument(
        "catalog_file",
        nargs="?",
        type=Path,
        default=None,
        help="File of catalog numbers, one per line (default: catalogNumbers.txt)",
    )
    images_parser.add_argument(
        "extracted_dir",
        nargs="?",
        type=Path,
        default=None,
        help="Directory containing occurrences.csv and multimedia.csv (default: ./extracted)",
    )
    images_parser.add_argument(
        "output_dir",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to save downloaded images (default: ./images)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_filter(args: argparse.Namespace) -> int:
    """Handle the 'filter' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    occurrences = args.occurrences or settings.occurrences_path
    catalog_file = args.catalog_file or settings.catalog_file
    output = args.output or settings.filtered_output

    try:
        result = filter_catalog(occurrences, catalog_file, output)
    except SpecimenMediaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Filtered {result['matched_rows']} of {result['input_rows']} rows into {output}")
    return 0


def cmd_images(args: argparse.Namespace) -> int:
    """Handle the 'images' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    catalog_file = args.catalog_file or settings.catalog_file
    extracted_dir = args.extracted_dir or settings.extracted_dir
    output_dir = args.output_dir or settings.output_dir

    try:
        report = fetch_images(catalog_file, extracted_dir, output_dir)
    except SpecimenMediaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Done: {report.succeeded}/{report.total} images saved to {output_dir}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Catalog file: {settings.catalog_file}")
    print(f"Extracted dir: {settings.extracted_dir}")
    print(f"Output dir: {settings.output_dir}")
    print(f"Request timeout: {settings.request_timeout}s, retries: {settings.download_retries}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "filter": cmd_filter,
        "images": cmd_images,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
