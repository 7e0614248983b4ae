#!/usr/bin/env python3
"""
Simple example: Find the next record holding an opcode

Each state is 16 bytes, with an 8 bit opcode starting at bit 20.
"""

import statescan

layout = statescan.RecordLayout(record_length=16, field_offset=20, field_length=8)
location = layout.location
print(f"Field starts in byte {location.byte_index}, bit {location.bit_position}")

result = statescan.scan("path/to/states.bin", layout, start_record=0, target=0x07)

if result.is_found:
    print(f"Opcode 0x07 first appears in state {result.record_index}")
elif result.is_failure:
    print(f"Scan failed: {result.error}")
else:
    print("Opcode 0x07 not found")
