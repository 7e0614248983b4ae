"""
statescan: Decode bit-packed fields from fixed-length binary state records

Locates a field by bit offset, extracts it from record buffers, and scans
state files for the first record whose field holds a given opcode.
"""

from .bits import INVALID_LOCATION, BitLocation, extract, locate
from .errors import ScanError
from .layout import RecordLayout
from .parser import StateFileParser
from .scanner import NOT_FOUND_INDEX, ScanResult, scan
from .values import find_all, read_field_values, read_records, record_count

__version__ = "0.1"
__all__ = [
    "INVALID_LOCATION",
    "NOT_FOUND_INDEX",
    "BitLocation",
    "RecordLayout",
    "ScanError",
    "ScanResult",
    "StateFileParser",
    "extract",
    "find_all",
    "locate",
    "read_field_values",
    "read_records",
    "record_count",
    "scan",
]
