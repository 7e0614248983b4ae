"""
State file parser bound to a single record layout
"""

from __future__ import annotations

from pathlib import Path

from .bits import BitLocation, extract, locate
from .layout import RecordLayout
from .scanner import ScanResult, scan


class StateFileParser:
    """Locates fields and searches state files for opcodes using one layout"""

    def __init__(self, layout: RecordLayout):
        self.layout = layout

    @property
    def state_length(self) -> int:
        return self.layout.record_length

    @property
    def field_length(self) -> int:
        return self.layout.field_length

    def get_field_location(self, field_offset: int | None = None) -> BitLocation:
        """Byte and MSB bit of the field, for the layout's offset unless one is given"""
        if field_offset is None:
            return self.layout.location
        return locate(field_offset)

    def field_value(self, record, location: BitLocation | None = None) -> int:
        """Decode the field from one record buffer"""
        if location is None:
            location = self.layout.location
        return extract(location.byte_index, location.bit_position, self.layout.field_length, record)

    def find_next(
        self,
        path: str | Path,
        start_state: int,
        opcode: int,
        location: BitLocation | None = None,
        cancel=None,
    ) -> ScanResult:
        """Find the next state at or after start_state holding opcode"""
        return scan(path, self.layout, start_state, opcode, location=location, cancel=cancel)

    def get_next_location(
        self,
        path: str | Path,
        start_state: int,
        opcode: int,
        location: BitLocation | None = None,
    ) -> int:
        """Like find_next, but returns the state number or -1

        -1 covers both "not found" and every failure. Use find_next to tell
        them apart.
        """
        return self.find_next(path, start_state, opcode, location).to_index()

    def __repr__(self):
        return f"StateFileParser({self.layout!r})"
