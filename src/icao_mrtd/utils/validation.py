"""
Soft validators for form-level feedback.

Each validator returns an empty string when the value is acceptable and a
readable sentence describing every problem otherwise. None of them raise.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date

MRZ_INVALID_CHARACTERS = re.compile(r"[^A-Z0-9<\s]", re.IGNORECASE)
HEX_INVALID_CHARACTERS = re.compile(r"[^0-9A-F]", re.IGNORECASE)
COUNTRY_CODE_INVALID = re.compile(r"[^A-Z]", re.IGNORECASE)
SIGNER_CODE_INVALID = re.compile(r"[^A-Z0-9]", re.IGNORECASE)
DOCUMENT_NUMBER_INVALID = re.compile(r"[^A-Z0-9]", re.IGNORECASE)
ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def stringify_validation_list(errors: Sequence[str]) -> str:
    """
    Join validation messages into one capitalized, punctuated sentence.

    Example:
        >>> stringify_validation_list(["too long", "bad characters"])
        'Too long; and bad characters.'
    """
    if not errors:
        return ""
    last = len(errors) - 1
    parts = []
    for index, error in enumerate(errors):
        if index == 0:
            error = error[0].upper() + error[1:]
        elif index == last:
            error = "and " + error
        parts.append(error + ("." if index == last else "; "))
    return "".join(parts)


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def _length_errors(value: str, minimum: int | None, maximum: int | None) -> list[str]:
    errors = []
    if minimum is not None and len(value) < minimum:
        errors.append(f"length must be at least {minimum} character{_plural(minimum)}")
    if maximum is not None and len(value) > maximum:
        errors.append(f"length must not be more than {maximum} character{_plural(maximum)}")
    return errors


def validate_mrz_string(value: str, minimum: int | None = None, maximum: int | None = None) -> str:
    """Check that ``value`` fits the MRZ alphabet and the given length bounds."""
    errors = _length_errors(value, minimum, maximum)
    if MRZ_INVALID_CHARACTERS.search(value):
        errors.append("must only use the characters A-Z, 0-9, ' ', or '<'")
    return stringify_validation_list(errors)


def validate_document_number(value: str, maximum: int = 9) -> str:
    """Check a document number: letters and digits only, no filler or spaces."""
    errors = _length_errors(value, None, maximum)
    if DOCUMENT_NUMBER_INVALID.search(value):
        errors.append("must only use the characters A-Z or 0-9")
    return stringify_validation_list(errors)


def validate_hex_string(value: str, minimum: int | None = None, maximum: int | None = None) -> str:
    """Check that ``value`` is a hexadecimal string within the given length bounds."""
    errors = _length_errors(value, minimum, maximum)
    if HEX_INVALID_CHARACTERS.search(value):
        errors.append("must only use the characters 0-9 or A-F")
    return stringify_validation_list(errors)


def validate_identifier_code(value: str) -> str:
    """
    Check a seal identifier code.

    The code is a two letter country code followed by a two character
    signer code.
    """
    errors = []
    if len(value) != 4:
        errors.append("full identifier code must be 4 characters long")
    if COUNTRY_CODE_INVALID.search(value[:2]):
        errors.append("country code (characters 1-2) must use only characters A-Z")
    if SIGNER_CODE_INVALID.search(value[2:]):
        errors.append("signer code (characters 3-4) must use only characters A-Z or 0-9")
    return stringify_validation_list(errors)


def validate_date_string(value: str) -> str:
    """Check that ``value`` is an ISO ``YYYY-MM-DD`` calendar date."""
    message = stringify_validation_list(["must be a valid date in the form YYYY-MM-DD"])
    if not isinstance(value, str) or not ISO_DATE.fullmatch(value):
        return message
    try:
        date.fromisoformat(value)
    except ValueError:
        return message
    return ""
