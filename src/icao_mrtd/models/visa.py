"""
Visa specific fields layered on top of the document identity.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from icao_mrtd.models.identity import DEFAULT_DATE
from icao_mrtd.utils.validation import validate_document_number


class VisaDetails(BaseModel):
    """Fields printed on machine readable visas (MRV-A and MRV-B)."""

    place_of_issue: str = Field(default="Utopia", description="Where the visa was issued")
    valid_from: date = Field(default=DEFAULT_DATE, description="First day the visa is valid")
    number_of_entries: str = Field(default="MULTIPLE", description="Permitted entries")
    visa_type: str = Field(default="Participant", description="Category of the visa")
    additional_info: str = Field(default="", description="Free text endorsement")
    passport_number: str = Field(default="", description="Number of the holder's passport")
    use_passport_in_mrz: bool = Field(
        default=False, description="Print the passport number in the MRZ document number field"
    )

    model_config = {"validate_assignment": True, "extra": "forbid"}

    @field_validator("passport_number", mode="before")
    @classmethod
    def validate_passport_number(cls, v: Any) -> str:
        v = str(v).upper()
        message = validate_document_number(v)
        if message:
            raise ValueError(message)
        return v

    @field_validator("place_of_issue", "number_of_entries", "visa_type", "additional_info", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        return str(v)
