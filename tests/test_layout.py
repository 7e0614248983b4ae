"""Tests for RecordLayout and ScanError."""

from __future__ import annotations

import pytest

from statescan.errors import (
    SCAN_ERROR_INVALID_CONFIGURATION,
    SCAN_ERROR_READ_ERROR,
    ScanError,
)
from statescan.layout import RecordLayout


class TestRecordLayout:
    def test_properties(self):
        layout = RecordLayout(16, 20, 8)
        assert layout.record_length == 16
        assert layout.field_offset == 20
        assert layout.field_length == 8
        assert layout.location == (2, 3)

    def test_immutable(self):
        layout = RecordLayout(4, 0, 8)
        with pytest.raises(AttributeError):
            layout.record_length = 8
        with pytest.raises(AttributeError):
            layout._record_length = 8
        assert layout.record_length == 4

    def test_replace_returns_new_layout(self):
        layout = RecordLayout(4, 0, 8)
        wider = layout.replace(field_length=12)
        assert wider == RecordLayout(4, 0, 12)
        assert layout.field_length == 8

    def test_equality_and_hash(self):
        assert RecordLayout(4, 3, 5) == RecordLayout(4, 3, 5)
        assert RecordLayout(4, 3, 5) != RecordLayout(4, 3, 6)
        assert len({RecordLayout(4, 3, 5), RecordLayout(4, 3, 5)}) == 1

    def test_repr(self):
        assert repr(RecordLayout(4, 3, 5)) == (
            "RecordLayout(record_length=4, field_offset=3, field_length=5)"
        )

    @pytest.mark.parametrize(
        "offset, width, fits",
        [(0, 32, True), (24, 8, True), (25, 8, False), (31, 1, True), (32, 1, False)],
    )
    def test_fits(self, offset, width, fits):
        assert RecordLayout(4, offset, width).fits is fits

    def test_zero_record_length_allowed(self):
        layout = RecordLayout(0, 0, 8)
        assert not layout.fits

    @pytest.mark.parametrize(
        "args",
        [
            (-1, 0, 8),
            (4, -1, 8),
            (4, 0, 0),
            (4, 0, -8),
            (4.0, 0, 8),
            (4, True, 8),
            ("4", 0, 8),
        ],
    )
    def test_invalid(self, args):
        with pytest.raises(ScanError) as excinfo:
            RecordLayout(*args)
        assert excinfo.value.value == SCAN_ERROR_INVALID_CONFIGURATION


class TestScanError:
    def test_message_and_detail(self):
        err = ScanError(SCAN_ERROR_READ_ERROR, "foo.bin: missing")
        assert str(err) == "Error reading state file. foo.bin: missing"
        assert err.value == SCAN_ERROR_READ_ERROR

    def test_message_without_detail(self):
        assert str(ScanError(SCAN_ERROR_INVALID_CONFIGURATION)) == (
            "Invalid record layout or scan parameters."
        )

    def test_undefined_code(self):
        assert str(ScanError(99)) == "Undefined error. (99)"

    def test_data_payload(self):
        cause = FileNotFoundError("gone")
        assert ScanError(SCAN_ERROR_READ_ERROR, data=cause).data is cause
