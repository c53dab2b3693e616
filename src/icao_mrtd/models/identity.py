"""
Identity data shared by every machine readable travel document.

These models follow ICAO Doc 9303 Part 3 field definitions.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from icao_mrtd.config import settings
from icao_mrtd.logging_config import get_logger
from icao_mrtd.utils.nationality_codes import is_known_code, is_user_assigned_code
from icao_mrtd.utils.validation import validate_document_number, validate_mrz_string

logger = get_logger(__name__)

DEFAULT_DATE = date(2023, 9, 29)


class Gender(str, Enum):
    """Gender marker according to ICAO standards."""

    MALE = "M"
    FEMALE = "F"
    UNSPECIFIED = "X"


def _check_country_code(value: str, label: str) -> str:
    value = str(value).upper()
    if len(value) != 3:
        msg = f"{label} must be 3 characters"
        raise ValueError(msg)
    message = validate_mrz_string(value)
    if message:
        raise ValueError(message)
    if settings.warn_unknown_codes and not (is_known_code(value) or is_user_assigned_code(value)):
        logger.warning(
            "%s '%s' is not defined in ISO-3166-1 or ICAO 9303 and is not in a "
            "user-assigned range (AAA-AAZ, QMA-QZZ, XAA-XZZ, ZZA-ZZZ)",
            label,
            value,
        )
    return value


class DocumentIdentity(BaseModel):
    """Holder and document data printed in the visual and machine readable zones."""

    type_code: str = Field(default="UN", description="Document code, 1-2 letters")
    authority_code: str = Field(default="UNK", description="Issuing state or organization")
    number: str = Field(default="111222333", description="Document number, up to 9 characters")
    birth_date: date = Field(default=DEFAULT_DATE, description="Holder's date of birth")
    gender_marker: Gender = Field(default=Gender.UNSPECIFIED, description="F, M or X")
    expiration_date: date = Field(default=DEFAULT_DATE, description="Date of expiry")
    nationality_code: str = Field(default="UNK", description="Holder's nationality")
    full_name: str = Field(
        default="Mann, Mister", description="'Primary, secondary' with optional '/latin' form"
    )
    optional_data: str = Field(default="", description="Issuer-defined data")
    picture: Any = Field(default=None, description="Opaque photo reference")
    signature: Any = Field(default=None, description="Opaque signature image reference")

    model_config = {"validate_assignment": True, "extra": "forbid"}

    @field_validator("type_code", mode="before")
    @classmethod
    def validate_type_code(cls, v: Any) -> str:
        v = str(v).upper().replace("<", "")
        if not 1 <= len(v) <= 2:
            msg = "Document code must be 1 or 2 characters"
            raise ValueError(msg)
        if not (v.isascii() and v.isalpha()):
            msg = "Document code must use only the characters A-Z"
            raise ValueError(msg)
        return v

    @field_validator("authority_code", mode="before")
    @classmethod
    def validate_authority_code(cls, v: Any) -> str:
        return _check_country_code(v, "Issuing state or organization code")

    @field_validator("nationality_code", mode="before")
    @classmethod
    def validate_nationality_code(cls, v: Any) -> str:
        return _check_country_code(v, "Nationality code")

    @field_validator("number", mode="before")
    @classmethod
    def validate_number(cls, v: Any) -> str:
        v = str(v).upper()
        message = validate_document_number(v)
        if message:
            raise ValueError(message)
        return v

    @field_validator("gender_marker", mode="before")
    @classmethod
    def validate_gender_marker(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("full_name", "optional_data", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        return str(v)
