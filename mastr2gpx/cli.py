#!/usr/bin/env python3
"""
Command line entry point for the Marktstammdatenregister GPX export.

Usage:
    mastr2gpx [options] input-directory

Examples:
    # All located solar units of a dump
    mastr2gpx ./Gesamtdatenexport

    # Units in two postal code areas
    mastr2gpx --postal-code 10115 --postal-code 10117 ./Gesamtdatenexport

    # Units inside a bounding box, written to berlin.gpx
    mastr2gpx --bbox 13.0,52.0,14.0,53.0 --output berlin.gpx ./Gesamtdatenexport
"""

import argparse
import sys
from typing import List, Optional

from .config import DEFAULT_DUMP_FILE_PREFIX, DEFAULT_OUTPUT_PATH, build_export_config
from .core.errors import Mastr2GpxError
from .pipeline.orchestrator import export_gpx_from_directory
from .utils.logging import close_log_file, open_log_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastr2gpx",
        usage="mastr2gpx [options] input-directory",
        description="Convert Marktstammdatenregister solar unit dumps into a GPX waypoint file.",
    )
    parser.add_argument("directory", help="Directory of the extracted dump")
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_PATH,
        help=f"The name of the GPX file to be written (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--postal-code",
        dest="postal_codes",
        action="append",
        default=[],
        metavar="CODE",
        help="Filter added entities by their postal code (repeatable)",
    )
    parser.add_argument(
        "--bbox",
        action="append",
        default=[],
        help="Filter added entities by a bounding box (Format: left,bottom,right,top)",
    )
    parser.add_argument(
        "--file-prefix",
        default=DEFAULT_DUMP_FILE_PREFIX,
        help=f"Name prefix of the dump files to read (default: {DEFAULT_DUMP_FILE_PREFIX})",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.bbox) > 1:
        parser.error("--bbox may be given at most once")

    try:
        # Configuration errors surface before any file is touched
        config = build_export_config(
            output=args.output,
            postal_codes=args.postal_codes,
            bbox=args.bbox[0] if args.bbox else None,
            file_prefix=args.file_prefix,
            debug=args.debug,
        )

        if args.log_file:
            open_log_file(args.log_file)

        try:
            export_gpx_from_directory(args.directory, config)
        finally:
            close_log_file()
    except (Mastr2GpxError, OSError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
