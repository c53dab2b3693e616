"""
BER/DER definite length encoding for seal TLV fields.
"""

from __future__ import annotations

from icao_mrtd.exceptions import SealFormatError, SealLengthError

MAX_LENGTH_BYTES = 4


def length_to_der_length(length: int) -> bytes:
    """
    Encode a length in DER definite form.

    Lengths below 128 take one byte; longer ones are ``0x80 | n`` followed by
    ``n`` big-endian bytes.
    """
    if length < 0:
        msg = f"Length cannot be negative: {length}"
        raise ValueError(msg)
    if length < 0x80:
        return bytes([length])
    size = (length.bit_length() + 7) // 8
    if size > MAX_LENGTH_BYTES:
        msg = f"Length {length} needs more than {MAX_LENGTH_BYTES} length bytes"
        raise ValueError(msg)
    return bytes([0x80 | size]) + length.to_bytes(size, "big")


def read_der_length(buffer: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Read a DER length starting at ``offset``.

    Returns:
        The decoded length and the number of bytes it occupied

    Raises:
        SealLengthError: If the buffer ends inside the length
        SealFormatError: If the long form uses zero or too many bytes, or is
            longer than needed
    """
    if offset >= len(buffer):
        msg = "Buffer ends before the TLV length"
        raise SealLengthError(msg)
    first = buffer[offset]
    if first & 0x80 == 0:
        return first, 1
    num_bytes = first & 0x7F
    if not 0 < num_bytes <= MAX_LENGTH_BYTES:
        msg = f"Unsupported DER length form {first:#04x}"
        raise SealFormatError(msg)
    length_bytes = buffer[offset + 1:offset + 1 + num_bytes]
    if len(length_bytes) != num_bytes:
        msg = "Buffer ends inside a long form DER length"
        raise SealLengthError(msg)
    length = int.from_bytes(length_bytes, "big")
    if length < 0x80 or length_bytes[0] == 0:
        msg = f"Long form DER length {length_bytes.hex()} is not minimal"
        raise SealFormatError(msg)
    return length, 1 + num_bytes


def der_length_to_length(data: bytes) -> int:
    """Decode a complete DER length; trailing bytes are an error."""
    length, consumed = read_der_length(data)
    if consumed != len(data):
        msg = f"DER length occupies {consumed} bytes but {len(data)} were given"
        raise SealLengthError(msg)
    return length
