"""
Sequential scanner over fixed-length state records
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from .bits import BitLocation, _is_int, extract
from .errors import (
    SCAN_ERROR_CANCELLED,
    SCAN_ERROR_INVALID_CONFIGURATION,
    SCAN_ERROR_MALFORMED_OFFSET,
    SCAN_ERROR_OUT_OF_BOUNDS,
    SCAN_ERROR_READ_ERROR,
    ScanError,
)
from .layout import RecordLayout

logger = logging.getLogger(__name__)

# Legacy "not found or failed" index
NOT_FOUND_INDEX = -1


class ScanResult:
    """Outcome of a scan: found at an index, not found, or failed with an error"""

    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILURE = "failure"

    def __init__(self, status: str, record_index: int | None = None, error: ScanError | None = None):
        self.status = status
        self.record_index = record_index
        self.error = error

    @classmethod
    def found(cls, record_index: int) -> ScanResult:
        return cls(cls.FOUND, record_index=record_index)

    @classmethod
    def not_found(cls) -> ScanResult:
        return cls(cls.NOT_FOUND)

    @classmethod
    def failure(cls, error: ScanError) -> ScanResult:
        return cls(cls.FAILURE, error=error)

    @property
    def is_found(self) -> bool:
        return self.status == self.FOUND

    @property
    def is_failure(self) -> bool:
        return self.status == self.FAILURE

    def to_index(self) -> int:
        """Record index if found, otherwise -1 (whether not found or failed)"""
        return self.record_index if self.is_found else NOT_FOUND_INDEX

    def __eq__(self, other):
        if not isinstance(other, ScanResult):
            return NotImplemented
        if self.status != other.status or self.record_index != other.record_index:
            return False
        if self.is_failure:
            return self.error.value == other.error.value
        return True

    def __hash__(self):
        return hash((self.status, self.record_index))

    def __repr__(self):
        if self.is_found:
            return f"ScanResult(found, record_index={self.record_index})"
        if self.is_failure:
            return f"ScanResult(failure, error={self.error!s})"
        return "ScanResult(not_found)"


def _to_location(location) -> BitLocation:
    """Coerce a caller-supplied (byte_index, bit_position) pair to a BitLocation"""
    try:
        byte_index, bit_position = location
    except (TypeError, ValueError):
        raise ScanError(SCAN_ERROR_MALFORMED_OFFSET, f"Invalid location {location!r}") from None
    if not _is_int(byte_index) or not _is_int(bit_position):
        raise ScanError(SCAN_ERROR_MALFORMED_OFFSET, f"Invalid location {location!r}")
    return BitLocation(byte_index, bit_position)


def _check_parameters(
    layout: RecordLayout, start_record: int, target: int, location: BitLocation
) -> None:
    """Raise ScanError if the scan cannot be run as requested"""
    if layout.record_length <= 0:
        raise ScanError(SCAN_ERROR_INVALID_CONFIGURATION, "record_length must be positive")
    if not location.is_valid:
        raise ScanError(SCAN_ERROR_INVALID_CONFIGURATION, f"Invalid location {tuple(location)}")
    if location.byte_index < 0 or not 0 <= location.bit_position <= 7:
        raise ScanError(SCAN_ERROR_MALFORMED_OFFSET, f"Invalid location {tuple(location)}")
    if not _is_int(start_record) or start_record < 0:
        raise ScanError(
            SCAN_ERROR_INVALID_CONFIGURATION, f"Invalid start record {start_record!r}"
        )
    if not _is_int(target) or not 0 <= target <= 0xFF:
        raise ScanError(
            SCAN_ERROR_INVALID_CONFIGURATION, f"Target {target!r} is not a byte value"
        )

    end_bit = location.byte_index * 8 + (7 - location.bit_position) + layout.field_length
    if end_bit > layout.record_length * 8:
        raise ScanError(
            SCAN_ERROR_OUT_OF_BOUNDS,
            f"Field ends at bit {end_bit} of a {layout.record_length} byte record",
        )


def _scan_stream(
    fp: BinaryIO,
    layout: RecordLayout,
    start_record: int,
    target: int,
    location: BitLocation,
    cancel,
) -> ScanResult:
    record_length = layout.record_length
    total = fp.seek(0, os.SEEK_END)

    position = start_record * record_length
    if position >= total:
        logger.debug("Start record %d is past the end of the file (%d bytes)", start_record, total)
        return ScanResult.not_found()
    fp.seek(position)

    n_advanced = 0
    # The final record of the file is never examined
    while position < total - record_length:
        if cancel is not None and cancel.is_set():
            raise ScanError(SCAN_ERROR_CANCELLED, f"After {n_advanced} records")

        record = bytearray(record_length)
        if fp.readinto(record) != record_length:
            break
        position += record_length

        value = extract(location.byte_index, location.bit_position, layout.field_length, record)
        if (value & 0xFF) == target:
            index = start_record + n_advanced
            logger.debug("Found %#04x at record %d", target, index)
            return ScanResult.found(index)

        n_advanced += 1

    logger.debug("%#04x not found in %d records from %d", target, n_advanced, start_record)
    return ScanResult.not_found()


def scan(
    source: str | Path,
    layout: RecordLayout,
    start_record: int,
    target: int,
    location: BitLocation | tuple[int, int] | None = None,
    cancel=None,
) -> ScanResult:
    """Find the first record at or after start_record whose field matches target

    Args:
        source: Path to the state file
        layout: Record and field layout
        start_record: Absolute index of the first record to examine
        target: Byte value compared against the low 8 bits of the field
        location: Field location, defaults to ``layout.location``
        cancel: Optional object with ``is_set()`` (e.g. threading.Event),
            checked before each record is read

    Returns:
        ScanResult. Problems with the parameters or the file are returned as
        failures rather than raised, and never look like "not found".
    """
    try:
        location = layout.location if location is None else _to_location(location)
        _check_parameters(layout, start_record, target, location)

        logger.debug("Scanning %s from record %d for %#04x", source, start_record, target)
        with open(source, "rb") as fp:
            return _scan_stream(fp, layout, start_record, target, location, cancel)
    except ScanError as e:
        logger.debug("Scan of %s failed: %s", source, e)
        return ScanResult.failure(e)
    except OSError as e:
        logger.debug("Scan of %s failed: %s", source, e)
        return ScanResult.failure(ScanError(SCAN_ERROR_READ_ERROR, f"{source}: {e}", data=e))
