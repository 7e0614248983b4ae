#!/usr/bin/env python3
"""
Unified CLI for statescan

Subcommands:
    locate  — Convert a bit offset to a byte index and bit position
    find    — Find the next record whose field holds an opcode
    dump    — Decode the field of every record to CSV
"""

import sys
from argparse import ArgumentParser

import statescan
from statescan.cli import dump, find, locate


def main():
    parser = ArgumentParser(
        prog="statescan",
        description="Decode and search bit-packed fields in fixed-length state records",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {statescan.__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    locate.add_args(subparsers)
    find.add_args(subparsers)
    dump.add_args(subparsers)

    args = parser.parse_args()
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
