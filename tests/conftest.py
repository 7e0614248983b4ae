"""Shared fixtures and helpers for statescan tests."""

from __future__ import annotations

from pathlib import Path

import pytest


def pack_field(value: int, width: int, offset: int, n_bytes: int, fill: int = 0x00) -> bytes:
    """Build an n_bytes record holding value at bit offset, MSB first.

    Every bit outside the field comes from the fill byte.
    """
    total_bits = n_bytes * 8
    assert 0 <= value < (1 << width)
    assert offset + width <= total_bits

    shift = total_bits - offset - width
    mask = ((1 << width) - 1) << shift
    base = int.from_bytes(bytes([fill]) * n_bytes, "big")
    packed = (base & ~mask) | (value << shift)
    return packed.to_bytes(n_bytes, "big")


def write_records(path: Path, records) -> Path:
    """Write records back to back, no header."""
    path.write_bytes(b"".join(bytes(r) for r in records))
    return path


@pytest.fixture()
def state_file(tmp_path):
    """Factory writing records to a fresh state file in tmp_path."""
    counter = iter(range(1000))

    def _make(records, name: str | None = None) -> Path:
        if name is None:
            name = f"states{next(counter)}.bin"
        return write_records(tmp_path / name, records)

    return _make


@pytest.fixture()
def opcode_file(state_file) -> Path:
    """One-byte records 01 05 07 05."""
    return state_file([b"\x01", b"\x05", b"\x07", b"\x05"])
