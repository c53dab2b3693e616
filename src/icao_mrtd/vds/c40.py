"""
C40 text compaction as used in Visible Digital Seal features.

Three characters pack into one 16 bit word ``1600*U1 + 40*U2 + U3 + 1``.
Two trailing characters are completed with SHIFT1; a single trailing
character is written as the ``0xFE`` latch followed by its DataMatrix ASCII
byte.
"""

from __future__ import annotations

import string

from icao_mrtd.exceptions import C40Error

C40_SHIFT1 = 0
C40_UNLATCH = 0xFE

C40_VALUES: dict[str, int] = {
    " ": 3,
    "<": 3,
    **{digit: index + 4 for index, digit in enumerate(string.digits)},
    **{letter: index + 14 for index, letter in enumerate(string.ascii_uppercase)},
}
C40_CHARACTERS: dict[int, str] = {value: char for char, value in C40_VALUES.items() if char != "<"}

# DataMatrix ASCII encodes a character as its code point plus one
DATAMATRIX_ASCII: dict[str, int] = {char: ord(" " if char == "<" else char) + 1 for char in C40_VALUES}
DATAMATRIX_CHARACTERS: dict[int, str] = {
    value: char for char, value in DATAMATRIX_ASCII.items() if char != "<"
}


def _c40_value(char: str) -> int:
    try:
        return C40_VALUES[char]
    except KeyError:
        msg = f"Character {char!r} cannot be encoded in C40"
        raise C40Error(msg) from None


def c40_encode(text: str) -> bytes:
    """
    Encode text over the MRZ alphabet (A-Z, 0-9, space and '<') as C40.

    Lowercase letters are uppercased. '<' encodes as a space.

    Raises:
        C40Error: If the text holds a character C40 cannot represent
    """
    text = text.upper()
    output = bytearray()
    for start in range(0, len(text), 3):
        chunk = text[start:start + 3]
        if len(chunk) == 1:
            _c40_value(chunk)
            output.extend((C40_UNLATCH, DATAMATRIX_ASCII[chunk]))
            continue
        values = [_c40_value(char) for char in chunk]
        if len(values) == 2:
            values.append(C40_SHIFT1)
        word = 1600 * values[0] + 40 * values[1] + values[2] + 1
        output.extend(word.to_bytes(2, "big"))
    return bytes(output)


def _c40_character(value: int) -> str:
    if value == C40_SHIFT1:
        return ""
    try:
        return C40_CHARACTERS[value]
    except KeyError:
        msg = f"C40 value {value} is outside the supported character set"
        raise C40Error(msg) from None


def c40_decode(data: bytes) -> str:
    """
    Decode C40 bytes back into text.

    Example:
        >>> c40_decode(bytes([235, 17, 254, 69]))
        'XKCD'

    Raises:
        C40Error: If the data is truncated or holds values outside the C40 set
    """
    data = bytes(data)
    if len(data) % 2:
        msg = f"C40 data must have an even number of bytes, got {len(data)}"
        raise C40Error(msg)

    decoded = []
    for index in range(0, len(data), 2):
        first, second = data[index], data[index + 1]
        if first == C40_UNLATCH:
            try:
                decoded.append(DATAMATRIX_CHARACTERS[second])
            except KeyError:
                msg = f"Byte {second} after the C40 unlatch is not a supported character"
                raise C40Error(msg) from None
            continue
        word = first * 256 + second
        u1 = (word - 1) // 1600
        u2 = (word - u1 * 1600 - 1) // 40
        u3 = word - u1 * 1600 - u2 * 40 - 1
        if word == 0 or u1 > 39:
            msg = f"C40 word {word:#06x} is out of range"
            raise C40Error(msg)
        decoded.extend(_c40_character(value) for value in (u1, u2, u3))
    return "".join(decoded)
