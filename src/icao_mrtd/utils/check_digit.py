"""
ICAO Doc 9303 Part 3 check digit calculation.
"""

from __future__ import annotations

import string

from icao_mrtd.exceptions import MRZFormatError

CHECK_DIGIT_WEIGHTS = (7, 3, 1)

# Filler and space count as zero, A = 10 ... Z = 35
CHARACTER_VALUES: dict[str, int] = {
    "<": 0,
    " ": 0,
    **{digit: int(digit) for digit in string.digits},
    **{letter: index + 10 for index, letter in enumerate(string.ascii_uppercase)},
}


def generate_mrz_check_digit(value: str) -> str:
    """
    Calculate the check digit as per ICAO Doc 9303 specifications.

    Args:
        value: MRZ text to protect

    Returns:
        Single character check digit

    Raises:
        MRZFormatError: If the value holds a character outside the MRZ alphabet
    """
    total = 0
    for index, char in enumerate(value):
        try:
            char_value = CHARACTER_VALUES[char]
        except KeyError:
            msg = f"Character {char!r} is not valid in an MRZ check digit calculation"
            raise MRZFormatError(msg) from None
        total += char_value * CHECK_DIGIT_WEIGHTS[index % 3]

    return str(total % 10)


def verify_mrz_check_digit(value: str, check_digit: str) -> bool:
    """Return True if ``check_digit`` matches the digit computed over ``value``."""
    return generate_mrz_check_digit(value) == check_digit
