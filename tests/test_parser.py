"""Tests for the StateFileParser facade."""

from __future__ import annotations

from conftest import pack_field

from statescan import StateFileParser
from statescan.bits import INVALID_LOCATION
from statescan.errors import SCAN_ERROR_INVALID_CONFIGURATION, SCAN_ERROR_READ_ERROR
from statescan.layout import RecordLayout
from statescan.scanner import ScanResult


class TestStateFileParser:
    def test_configuration(self):
        parser = StateFileParser(RecordLayout(8, 19, 6))
        assert parser.state_length == 8
        assert parser.field_length == 6
        assert repr(parser) == (
            "StateFileParser(RecordLayout(record_length=8, field_offset=19, field_length=6))"
        )

    def test_get_field_location(self):
        parser = StateFileParser(RecordLayout(8, 19, 6))
        assert parser.get_field_location() == (2, 4)
        assert parser.get_field_location(0) == (0, 7)
        assert parser.get_field_location(63) == (7, 0)

    def test_field_value(self):
        parser = StateFileParser(RecordLayout(3, 5, 11))
        record = pack_field(0x4D2, 11, 5, 3, fill=0xFF)
        assert parser.field_value(record) == 0x4D2

    def test_find_next(self, state_file):
        path = state_file([pack_field(v, 6, 19, 8) for v in (1, 2, 3, 4, 5)])
        parser = StateFileParser(RecordLayout(8, 19, 6))
        assert parser.find_next(path, 0, 3) == ScanResult.found(2)
        assert parser.find_next(path, 3, 1) == ScanResult.not_found()

    def test_get_next_location(self, opcode_file):
        parser = StateFileParser(RecordLayout(1, 0, 8))
        assert parser.get_next_location(opcode_file, 0, 0x07) == 2
        assert parser.get_next_location(opcode_file, 1, 0x05) == 1
        assert parser.get_next_location(opcode_file, 0, 0x42) == -1

    def test_get_next_location_hides_failures(self, tmp_path, opcode_file):
        parser = StateFileParser(RecordLayout(1, 0, 8))
        assert parser.get_next_location(tmp_path / "missing.bin", 0, 0x07) == -1
        assert parser.get_next_location(opcode_file, 0, 0x07, INVALID_LOCATION) == -1

    def test_find_next_reports_failures(self, tmp_path, opcode_file):
        parser = StateFileParser(RecordLayout(1, 0, 8))
        missing = parser.find_next(tmp_path / "missing.bin", 0, 0x07)
        assert missing.error.value == SCAN_ERROR_READ_ERROR
        invalid = parser.find_next(opcode_file, 0, 0x07, INVALID_LOCATION)
        assert invalid.error.value == SCAN_ERROR_INVALID_CONFIGURATION
