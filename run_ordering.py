#!/usr/bin/env python3
# run_ordering.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Command-line interface for causally ordering a file of vector clocks

import sys
import json
import argparse
from pathlib import Path
from typing import List

from model import VectorClock, order_clocks
from parser import format_clock
from utils.clock_reader import read_clocks, validate_clock_file, ClockFileError
from utils.logger import LogLevel, get_logger


def configure_logging_for_ordering(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for the ordering tool.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging (overrides verbose)
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    else:
        # Results are printed at INFO, so quiet mode still shows them
        logger.set_level(LogLevel.INFO)


def format_entry(entry, as_json: bool = False) -> str:
    """Render one ordered entry.

    A standalone clock renders as its compact notation (or wire form with
    ``as_json``); a group of independent clocks renders as ``{ a | b }``
    (or a JSON array of wire forms).
    """
    if isinstance(entry, VectorClock):
        return entry.serialize() if as_json else _render_clock(entry)

    if as_json:
        return json.dumps([vc.to_dict() for vc in entry], sort_keys=True)
    return "{ " + " | ".join(_render_clock(vc) for vc in entry) + " }"


def _render_clock(vc: VectorClock) -> str:
    """Compact notation, or the wire form for ids the notation cannot express."""
    try:
        return format_clock(vc)
    except ValueError:
        return vc.serialize()


def run_ordering_session(clock_path: str, as_json: bool) -> List[str]:
    """Read, order and render every clock in the file.

    Args:
        clock_path: Path to clock file
        as_json: Render entries in JSON wire form

    Returns:
        One rendered line per ordered entry, latest first
    """
    clocks = list(read_clocks(clock_path))
    return [format_entry(entry, as_json) for entry in order_clocks(*clocks)]


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="VClocks causal ordering of vector clocks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_ordering.py -c clocks.txt
  python run_ordering.py -c clocks.txt --json
  python run_ordering.py -c clocks.txt --debug
  python run_ordering.py -c clocks.txt --validate-only

Clock file format (one clock per line, '#' starts a comment):
  {"id":"A","clocks":{"A":2,"B":1}}
  B[A:1, B:1]
  C[A:1, B:1, C:1]

Output is latest first; concurrent clocks are grouped as { a | b }.
        """,
    )

    parser.add_argument(
        "-c", "--clocks", required=True, type=Path, help="Path to clock file"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only validate clock file format"
    )

    parser.add_argument(
        "--json", action="store_true", help="Print entries in JSON wire form"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the ordering tool.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_ordering(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.verbose:
            logger.info(f"🔍 Validating clock file: {args.clocks}")
        count = validate_clock_file(str(args.clocks))

        if args.validate_only:
            logger.info(f"✅ Clock file validation successful ({count} clocks). Exiting.")
            return 0

        if args.verbose:
            logger.info(f"📋 Ordering {count} clocks (latest first)")

        for line in run_ordering_session(str(args.clocks), args.json):
            logger.info(line)

        return 0

    except ClockFileError as e:
        logger.error(f"Clock file error: {e}")
        return 1

    except KeyboardInterrupt:
        logger.error("Ordering interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
