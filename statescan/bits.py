"""
Bit addressing and field extraction for bit-packed records

Bits are numbered from the left of each byte, so a field offset of 0 is the
most significant bit of byte 0:

    byte[0]            byte[1]
    7 6 5 4 3 2 1 0 || 7 6 5 4 3 2 1 0 || ...
    | | |              | |
    | | offset 2       | offset 9
    | offset 1         offset 8
    offset 0
"""

from __future__ import annotations

from typing import NamedTuple

from .errors import (
    SCAN_ERROR_INVALID_WIDTH,
    SCAN_ERROR_MALFORMED_OFFSET,
    SCAN_ERROR_OUT_OF_BOUNDS,
    ScanError,
)


class BitLocation(NamedTuple):
    """Byte holding a field's most significant bit, and that bit's position (7..0)"""

    byte_index: int
    bit_position: int

    @property
    def is_valid(self) -> bool:
        return self.byte_index != -1 and self.bit_position != -1


INVALID_LOCATION = BitLocation(-1, -1)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def locate(field_offset: int) -> BitLocation:
    """Convert a bit offset into a byte index and an MSB-first bit position

    Args:
        field_offset: Number of bits from the start of the record to the
            field's most significant bit

    Returns:
        BitLocation, with bit_position 7 for the leftmost bit of a byte

    Raises:
        ScanError: SCAN_ERROR_MALFORMED_OFFSET for negative or non-integer offsets
    """
    if not _is_int(field_offset) or field_offset < 0:
        raise ScanError(SCAN_ERROR_MALFORMED_OFFSET, f"Got {field_offset!r}")

    byte_index, remainder = divmod(field_offset, 8)
    return BitLocation(byte_index, 7 - remainder)


def extract(byte_index: int, bit_position: int, width: int, data) -> int:
    """Extract ``width`` consecutive bits from ``data`` as an unsigned integer

    The first byte has the bits above ``bit_position`` masked off, whole
    bytes are shifted in after it until enough bits are held, and any
    trailing bits past the end of the field are shifted back out.

    Args:
        byte_index: Byte containing the field's most significant bit
        bit_position: Position of that bit within the byte, 7 (MSB) to 0 (LSB)
        width: Field width in bits
        data: Bytes-like record buffer

    Returns:
        Field value, right aligned

    Raises:
        ScanError: invalid width, malformed bit position, or a field that
            reads past the end of ``data``
    """
    if not _is_int(width) or width <= 0:
        raise ScanError(SCAN_ERROR_INVALID_WIDTH, f"Width must be positive, got {width!r}")
    if not _is_int(bit_position) or not 0 <= bit_position <= 7:
        raise ScanError(SCAN_ERROR_MALFORMED_OFFSET, f"Bit position {bit_position!r} not in 0..7")
    if not _is_int(byte_index) or byte_index < 0:
        raise ScanError(SCAN_ERROR_OUT_OF_BOUNDS, f"Byte index {byte_index!r}")

    end_bit = byte_index * 8 + (7 - bit_position) + width
    if end_bit > len(data) * 8:
        raise ScanError(
            SCAN_ERROR_OUT_OF_BOUNDS,
            f"{width} bit field at byte {byte_index} bit {bit_position}"
            f" needs {(end_bit + 7) // 8} bytes, have {len(data)}",
        )

    value = data[byte_index] & ((1 << (bit_position + 1)) - 1)
    n_bits = bit_position + 1

    index = byte_index + 1
    while n_bits < width:
        value = (value << 8) | data[index]
        n_bits += 8
        index += 1

    # Drop bits past the end of the field
    if n_bits > width:
        value >>= n_bits - width

    return value
