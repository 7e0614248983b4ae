"""
Record layout for state files
"""

from __future__ import annotations

from .bits import BitLocation, locate
from .errors import SCAN_ERROR_INVALID_CONFIGURATION, ScanError


class RecordLayout:
    """Immutable description of a state record and the field packed in it"""

    __slots__ = ("_record_length", "_field_offset", "_field_length")

    def __init__(self, record_length: int, field_offset: int, field_length: int):
        """Validate and store the layout

        Args:
            record_length: Bytes per record
            field_offset: Bits from the start of a record to the field's MSB
            field_length: Field width in bits
        """
        for name, value in (
            ("record_length", record_length),
            ("field_offset", field_offset),
            ("field_length", field_length),
        ):
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ScanError(
                    SCAN_ERROR_INVALID_CONFIGURATION,
                    f"{name} must be a non-negative integer, got {value!r}",
                )
        if field_length == 0:
            raise ScanError(SCAN_ERROR_INVALID_CONFIGURATION, "field_length must be positive")

        object.__setattr__(self, "_record_length", record_length)
        object.__setattr__(self, "_field_offset", field_offset)
        object.__setattr__(self, "_field_length", field_length)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def record_length(self) -> int:
        """Bytes per record"""
        return self._record_length

    @property
    def field_offset(self) -> int:
        """Bit offset of the field within a record"""
        return self._field_offset

    @property
    def field_length(self) -> int:
        """Field width in bits"""
        return self._field_length

    @property
    def location(self) -> BitLocation:
        """Byte index and bit position of the field's MSB"""
        return locate(self._field_offset)

    @property
    def fits(self) -> bool:
        """Check if the field lies entirely within one record"""
        return self._field_offset + self._field_length <= self._record_length * 8

    def replace(self, **kwargs) -> RecordLayout:
        """Return a copy with some values changed"""
        values = {
            "record_length": self._record_length,
            "field_offset": self._field_offset,
            "field_length": self._field_length,
        }
        values.update(kwargs)
        return RecordLayout(**values)

    def __eq__(self, other):
        if not isinstance(other, RecordLayout):
            return NotImplemented
        return (self._record_length, self._field_offset, self._field_length) == (
            other._record_length,
            other._field_offset,
            other._field_length,
        )

    def __hash__(self):
        return hash((self._record_length, self._field_offset, self._field_length))

    def __repr__(self):
        return (
            f"RecordLayout(record_length={self._record_length}, "
            f"field_offset={self._field_offset}, field_length={self._field_length})"
        )
