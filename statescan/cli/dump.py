#
# dump subcommand
#
# Decodes the field from every complete record and writes record,value CSV.
#

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

import numpy as np
import pandas as pd

from statescan.cli import logger
from statescan.cli.common import add_layout_args, int_auto, layout_from_args
from statescan.errors import ScanError
from statescan.values import read_field_values


def _add_common_args(parser) -> None:
    """Add arguments shared between the subcommand and standalone entry point."""
    parser.add_argument("file", type=Path, help="State file to decode")
    add_layout_args(parser)
    parser.add_argument(
        "-s",
        "--start",
        type=int_auto,
        default=0,
        metavar="record",
        help="Index of the first record to decode (default: 0)",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int_auto,
        metavar="records",
        help="Maximum number of records to decode (default: all)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="filename",
        help="Where to store the CSV (default: stdout)",
    )
    logger.add_args(parser)


def add_args(subparsers) -> None:
    """Register the 'dump' subcommand."""
    parser = subparsers.add_parser(
        "dump",
        help="Decode the field of every record to CSV",
        description="Decode a bit-packed field from each state record and write CSV",
    )
    _add_common_args(parser)
    parser.set_defaults(func=run)


def run(args) -> int:
    """Execute the dump subcommand."""
    logger.mk_logger(args)

    if not args.file.exists():
        logging.error("File not found: %s", args.file)
        return 1

    try:
        layout = layout_from_args(args)
        values = read_field_values(args.file, layout, start=args.start, count=args.count)
    except (OSError, ScanError) as e:
        logging.error("Error decoding %s: %s", args.file, e)
        return 2

    df = pd.DataFrame(
        {
            "record": np.arange(args.start, args.start + len(values), dtype=np.int64),
            "value": values,
        }
    )

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.output, index=False)
    else:
        df.to_csv(sys.stdout, index=False)

    logging.info("Wrote %d records from %s", len(df), args.file)
    return 0


def main():
    """Standalone entry point."""
    parser = ArgumentParser(description="Decode a bit-packed field from each state record to CSV")
    _add_common_args(parser)
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
