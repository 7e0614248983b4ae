#!/usr/bin/env python3
"""
Example: Decode a field from every record with numpy

Decodes a 12 bit field at bit 4 of each 8 byte state, then finds every
state whose field's low byte is 0x2A.
"""

import numpy as np

import statescan

layout = statescan.RecordLayout(record_length=8, field_offset=4, field_length=12)

print(f"{statescan.record_count('path/to/states.bin', layout)} complete states")

values = statescan.read_field_values("path/to/states.bin", layout)
print(f"Field range: {values.min()} to {values.max()}")
print("Most common values:", np.unique(values, return_counts=True))

matches = statescan.find_all("path/to/states.bin", layout, target=0x2A)
print(f"0x2A appears in states: {matches.tolist()}")
