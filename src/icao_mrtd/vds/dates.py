"""
Seal header dates: ``MMDDYYYY`` as a 3 byte big-endian integer.
"""

from __future__ import annotations

from datetime import date

from icao_mrtd.exceptions import SealFormatError

DATE_LENGTH = 3


def date_to_seal_bytes(value: date) -> bytes:
    """
    Example:
        >>> date_to_seal_bytes(date(2023, 9, 29)).hex()
        '8dc8f7'
    """
    return int(value.strftime("%m%d%Y")).to_bytes(DATE_LENGTH, "big")


def seal_bytes_to_date(data: bytes) -> date:
    if len(data) != DATE_LENGTH:
        msg = f"Seal dates are {DATE_LENGTH} bytes, got {len(data)}"
        raise SealFormatError(msg)
    digits = str(int.from_bytes(data, "big")).zfill(8)
    try:
        return date(int(digits[4:]), int(digits[:2]), int(digits[2:4]))
    except ValueError as exc:
        msg = f"Invalid seal date {digits}"
        raise SealFormatError(msg) from exc
