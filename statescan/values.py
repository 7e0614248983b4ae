"""
Bulk decoding of state files into numpy arrays

These read every complete record in one pass. Unlike scan(), the final
record of the file is included.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .bits import BitLocation, _is_int
from .errors import (
    SCAN_ERROR_INVALID_CONFIGURATION,
    SCAN_ERROR_INVALID_WIDTH,
    SCAN_ERROR_MALFORMED_OFFSET,
    SCAN_ERROR_OUT_OF_BOUNDS,
    ScanError,
)
from .layout import RecordLayout

logger = logging.getLogger(__name__)

MAX_ARRAY_WIDTH = 64


def record_count(path: str | Path, layout: RecordLayout) -> int:
    """Number of complete records in a state file"""
    if layout.record_length <= 0:
        raise ScanError(SCAN_ERROR_INVALID_CONFIGURATION, "record_length must be positive")

    size = Path(path).stat().st_size
    n_records, extra = divmod(size, layout.record_length)
    if extra:
        logger.warning(
            "%s has %d trailing bytes after %d records of %d bytes",
            path,
            extra,
            n_records,
            layout.record_length,
        )
    return n_records


def read_records(
    path: str | Path, layout: RecordLayout, start: int = 0, count: int | None = None
) -> np.ndarray:
    """Read complete records as a 2D uint8 array of shape (n_records, record_length)

    Args:
        path: State file
        layout: Record layout (only record_length is used)
        start: Index of the first record to read
        count: Maximum number of records to read (None = to the end)
    """
    if start < 0:
        raise ScanError(SCAN_ERROR_INVALID_CONFIGURATION, f"Invalid start record {start}")
    if count is not None and count < 0:
        raise ScanError(SCAN_ERROR_INVALID_CONFIGURATION, f"Invalid record count {count}")

    record_length = layout.record_length
    n_records = max(0, record_count(path, layout) - start)
    if count is not None:
        n_records = min(n_records, count)

    if n_records == 0:
        return np.empty((0, record_length), dtype=np.uint8)

    data = np.fromfile(
        path, dtype=np.uint8, count=n_records * record_length, offset=start * record_length
    )
    return data.reshape(n_records, record_length)


def decode_fields(records: np.ndarray, location: BitLocation, width: int) -> np.ndarray:
    """Decode one field from every row of a 2D uint8 record array

    Same bit order as bits.extract, vectorised over records. The accumulator
    never holds more than ``width`` bits, so widths up to 64 fit in uint64.
    """
    if width <= 0 or width > MAX_ARRAY_WIDTH:
        raise ScanError(
            SCAN_ERROR_INVALID_WIDTH, f"Width must be 1..{MAX_ARRAY_WIDTH}, got {width}"
        )
    byte_index, bit_position = location
    if not _is_int(bit_position) or not 0 <= bit_position <= 7:
        raise ScanError(SCAN_ERROR_MALFORMED_OFFSET, f"Bit position {bit_position!r} not in 0..7")
    end_bit = byte_index * 8 + (7 - bit_position) + width
    if byte_index < 0 or end_bit > records.shape[1] * 8:
        raise ScanError(
            SCAN_ERROR_OUT_OF_BOUNDS,
            f"Field ends at bit {end_bit} of a {records.shape[1]} byte record",
        )

    n_bits = bit_position + 1
    values = records[:, byte_index].astype(np.uint64) & np.uint64((1 << n_bits) - 1)
    if width <= n_bits:
        return values >> np.uint64(n_bits - width)

    remaining = width - n_bits
    column = byte_index + 1
    while remaining > 0:
        take = min(8, remaining)
        byte = records[:, column].astype(np.uint64) >> np.uint64(8 - take)
        values = (values << np.uint64(take)) | byte
        remaining -= take
        column += 1

    return values


def read_field_values(
    path: str | Path, layout: RecordLayout, start: int = 0, count: int | None = None
) -> np.ndarray:
    """Decode the layout's field from each complete record into a uint64 array"""
    if layout.field_length > MAX_ARRAY_WIDTH:
        raise ScanError(
            SCAN_ERROR_INVALID_WIDTH,
            f"Array decoding supports at most {MAX_ARRAY_WIDTH} bits, got {layout.field_length}",
        )
    if not layout.fits:
        raise ScanError(SCAN_ERROR_OUT_OF_BOUNDS, repr(layout))

    records = read_records(path, layout, start=start, count=count)
    return decode_fields(records, layout.location, layout.field_length)


def find_all(path: str | Path, layout: RecordLayout, target: int, start: int = 0) -> np.ndarray:
    """Absolute indices of every record whose field's low byte equals target"""
    if not _is_int(target) or not 0 <= target <= 0xFF:
        raise ScanError(SCAN_ERROR_INVALID_CONFIGURATION, f"Target {target!r} is not a byte value")

    values = read_field_values(path, layout, start=start)
    matches = np.flatnonzero((values & np.uint64(0xFF)) == np.uint64(target)) + start
    logger.debug("Found %d records holding %#04x in %s", len(matches), target, path)
    return matches
