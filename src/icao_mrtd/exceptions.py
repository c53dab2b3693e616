"""
Custom exceptions for the travel document codec.
"""

from __future__ import annotations

from typing import Any


class MRTDException(Exception):
    """Base exception class for travel document and seal errors."""

    default_error_code = "MRTD_ERROR"

    def __init__(self, message, error_code=None, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.details = details or {}


class FormatError(MRTDException, ValueError):
    """Raised when encoded data is structurally malformed."""

    default_error_code = "FORMAT_ERROR"


class LengthError(FormatError):
    """Raised when encoded data has the wrong length."""

    default_error_code = "LENGTH_ERROR"


class MRZFormatError(FormatError):
    """Raised when an MRZ field cannot be decoded."""

    default_error_code = "MRZ_FORMAT_ERROR"


class MRZLengthError(LengthError):
    """Raised when an MRZ or one of its lines has the wrong length."""

    default_error_code = "MRZ_LENGTH_ERROR"


class C40Error(FormatError):
    """Raised for characters or byte sequences outside the C40 alphabet."""

    default_error_code = "C40_ERROR"


class SealFormatError(FormatError):
    """Raised for a bad magic byte, version, marker or missing feature."""

    default_error_code = "SEAL_FORMAT_ERROR"


class SealLengthError(LengthError):
    """Raised when a seal zone or TLV length does not match its payload."""

    default_error_code = "SEAL_LENGTH_ERROR"


class SemanticError(MRTDException):
    """Raised when well-formed data is internally inconsistent."""

    default_error_code = "SEMANTIC_ERROR"


class CheckDigitError(SemanticError):
    """Exception raised when an embedded check digit does not match."""

    default_error_code = "CHECK_DIGIT_MISMATCH"

    def __init__(self, field: str, expected: str, actual: str) -> None:
        super().__init__(
            f"Check digit mismatch for {field}: expected {expected}, found {actual}",
            details={"field": field, "expected": expected, "actual": actual},
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class SealConsistencyError(SemanticError):
    """Raised when the seal header disagrees with the document it carries."""

    default_error_code = "SEAL_INCONSISTENT"


class FieldValueError(MRTDException, ValueError):
    """Exception raised for a rejected attribute assignment."""

    default_error_code = "INVALID_FIELD"

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid value for {field}: {reason}", details={"field": field})
        self.field = field
