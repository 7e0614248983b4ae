#
# find subcommand
#
# Searches a state file for the first record, at or after a starting record,
# whose field holds an opcode.
#
# Exit status: 0 found, 1 not found, 2 error.
#

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

from statescan.cli import logger
from statescan.cli.common import add_layout_args, int_auto, layout_from_args
from statescan.errors import ScanError
from statescan.scanner import scan
from statescan.values import find_all


def _add_common_args(parser) -> None:
    """Add arguments shared between the subcommand and standalone entry point."""
    parser.add_argument("file", type=Path, help="State file to search")
    add_layout_args(parser)
    parser.add_argument(
        "-t",
        "--target",
        type=int_auto,
        required=True,
        metavar="opcode",
        help="Byte value to search for, e.g. 7 or 0x07",
    )
    parser.add_argument(
        "-s",
        "--start",
        type=int_auto,
        default=0,
        metavar="record",
        help="Index of the first record to examine (default: 0)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print every matching record, including the last one in the file",
    )
    logger.add_args(parser)


def add_args(subparsers) -> None:
    """Register the 'find' subcommand."""
    parser = subparsers.add_parser(
        "find",
        help="Find the next record holding an opcode",
        description="Search a state file for records whose field equals an opcode",
    )
    _add_common_args(parser)
    parser.set_defaults(func=run)


def _run_all(args, layout) -> int:
    try:
        matches = find_all(args.file, layout, args.target, start=args.start)
    except (OSError, ScanError) as e:
        logging.error("Error scanning %s: %s", args.file, e)
        return 2

    logging.info("%d records in %s hold %#04x", len(matches), args.file, args.target)
    if len(matches) == 0:
        return 1
    sys.stdout.write("".join(f"{index}\n" for index in matches))
    return 0


def run(args) -> int:
    """Execute the find subcommand."""
    logger.mk_logger(args)

    try:
        layout = layout_from_args(args)
    except ScanError as e:
        logging.error("%s", e)
        return 2

    if args.all:
        return _run_all(args, layout)

    result = scan(args.file, layout, args.start, args.target)
    if result.is_failure:
        logging.error("Error scanning %s: %s", args.file, result.error)
        return 2
    if not result.is_found:
        logging.info("%#04x not found in %s after record %d", args.target, args.file, args.start)
        return 1

    sys.stdout.write(f"{result.record_index}\n")
    return 0


def main():
    """Standalone entry point."""
    parser = ArgumentParser(description="Find the next record holding an opcode")
    _add_common_args(parser)
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
