#
# locate subcommand
#
# Prints the byte index and MSB-first bit position of a bit offset.
#

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser

from statescan.bits import locate
from statescan.cli import logger
from statescan.cli.common import int_auto
from statescan.errors import ScanError


def _add_common_args(parser) -> None:
    """Add arguments shared between the subcommand and standalone entry point."""
    parser.add_argument(
        "-f",
        "--field-offset",
        type=int_auto,
        required=True,
        metavar="bits",
        help="Bit offset of the field's most significant bit",
    )
    logger.add_args(parser)


def add_args(subparsers) -> None:
    """Register the 'locate' subcommand."""
    parser = subparsers.add_parser(
        "locate",
        help="Convert a bit offset to a byte index and bit position",
        description="Print '<byte index> <bit position>' for a field bit offset",
    )
    _add_common_args(parser)
    parser.set_defaults(func=run)


def run(args) -> int:
    """Execute the locate subcommand."""
    logger.mk_logger(args)

    try:
        location = locate(args.field_offset)
    except ScanError as e:
        logging.error("%s", e)
        return 2

    sys.stdout.write(f"{location.byte_index} {location.bit_position}\n")
    return 0


def main():
    """Standalone entry point."""
    parser = ArgumentParser(description="Convert a bit offset to a byte index and bit position")
    _add_common_args(parser)
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
