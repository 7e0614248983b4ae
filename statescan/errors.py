"""Error codes and exception class for record decoding and scanning."""

from __future__ import annotations

SCAN_ERROR_MALFORMED_OFFSET = 1
SCAN_ERROR_OUT_OF_BOUNDS = 2
SCAN_ERROR_INVALID_WIDTH = 3
SCAN_ERROR_INVALID_CONFIGURATION = 4
SCAN_ERROR_READ_ERROR = 5
SCAN_ERROR_CANCELLED = 6

_MESSAGES = {
    SCAN_ERROR_MALFORMED_OFFSET: "Malformed bit offset.",
    SCAN_ERROR_OUT_OF_BOUNDS: "Field extends past the end of the data.",
    SCAN_ERROR_INVALID_WIDTH: "Invalid field width.",
    SCAN_ERROR_INVALID_CONFIGURATION: "Invalid record layout or scan parameters.",
    SCAN_ERROR_READ_ERROR: "Error reading state file.",
    SCAN_ERROR_CANCELLED: "Scan was cancelled.",
}


class ScanError(Exception):
    """Raised by the decoders, and carried by failed scan results.

    ``value`` is one of the ``SCAN_ERROR_*`` codes, ``mesg`` an optional
    detail appended to the standard message and ``data`` an optional payload
    (the underlying ``OSError`` for read errors).
    """

    def __init__(self, value=SCAN_ERROR_INVALID_CONFIGURATION, mesg=None, data=None):
        super().__init__(value, mesg)
        self.value = value
        self.mesg = mesg
        self.data = data

    def __str__(self):
        mesg = _MESSAGES.get(self.value, f"Undefined error. ({self.value})")
        if self.mesg:
            mesg = " ".join((mesg, self.mesg))
        return mesg
