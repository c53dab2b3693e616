"""
Visible Digital Seal constants and enumerations (ICAO Doc 9303 Part 13).
"""

from __future__ import annotations

from enum import IntEnum

VDS_MAGIC = 0xDC
SIGNATURE_MARKER = 0xFF

# Feature tag holding the C40 packed copy of the MRZ
MRZ_FEATURE_TAG = 0x01


class SealVersion(IntEnum):
    """Header version byte; the byte is the version number minus one."""

    V3 = 0x02
    V4 = 0x03


class SealTypeCategory(IntEnum):
    """Document type category byte of the seal header."""

    EVENTS_PASSPORT = 0x02
    CREW_CERTIFICATE = 0x04
    CREW_LICENSE = 0x06
    CREW_ID = 0x08
    EVENTS_VISA = 0x0A
