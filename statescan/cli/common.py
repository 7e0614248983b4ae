"""Argument helpers shared by the statescan subcommands."""

from __future__ import annotations

from argparse import ArgumentParser, ArgumentTypeError, Namespace

from statescan.layout import RecordLayout


def int_auto(value: str) -> int:
    """argparse type accepting decimal, 0x hex, 0o octal or 0b binary."""
    try:
        return int(value, 0)
    except ValueError:
        raise ArgumentTypeError(f"invalid integer: {value!r}") from None


def add_layout_args(parser: ArgumentParser) -> None:
    """Add the record layout options."""
    grp = parser.add_argument_group("Record Layout Options")
    grp.add_argument(
        "-l",
        "--record-length",
        type=int_auto,
        required=True,
        metavar="bytes",
        help="Length of each state record in bytes",
    )
    grp.add_argument(
        "-f",
        "--field-offset",
        type=int_auto,
        required=True,
        metavar="bits",
        help="Bit offset of the field's most significant bit within a record",
    )
    grp.add_argument(
        "-w",
        "--field-length",
        type=int_auto,
        required=True,
        metavar="bits",
        help="Width of the field in bits",
    )


def layout_from_args(args: Namespace) -> RecordLayout:
    """Build the RecordLayout described by the parsed options."""
    return RecordLayout(args.record_length, args.field_offset, args.field_length)
