"""
Machine readable visas (ICAO Doc 9303 Part 7).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from icao_mrtd.documents.travel_document import TravelDocument
from icao_mrtd.models.attributes import ModelAttribute, updated_copy
from icao_mrtd.models.visa import VisaDetails
from icao_mrtd.mrz.layouts import MRVA, MRVB
from icao_mrtd.utils.mrz_strings import to_viz


class VisaDocument(TravelDocument):
    """
    Travel document carrying visa fields next to the holder identity.

    When ``use_passport_in_mrz`` is set the MRZ document number field carries
    the holder's passport number instead of the visa number.
    """

    place_of_issue = ModelAttribute("_visa")
    valid_from = ModelAttribute("_visa")
    number_of_entries = ModelAttribute("_visa")
    visa_type = ModelAttribute("_visa")
    additional_info = ModelAttribute("_visa")
    passport_number = ModelAttribute("_visa")
    use_passport_in_mrz = ModelAttribute("_visa")

    _VISA_FIELDS = frozenset(VisaDetails.model_fields)

    def __init__(self, **fields: Any) -> None:
        self._visa = VisaDetails()
        super().__init__(**fields)

    @property
    def valid_thru(self) -> date:
        """Last day the visa is valid, printed in the MRZ expiration field."""
        return self.expiration_date

    @valid_thru.setter
    def valid_thru(self, value: Any) -> None:
        self.expiration_date = value

    @property
    def visa(self) -> VisaDetails:
        return self._visa.model_copy()

    def update(self, **fields: Any) -> None:
        if "valid_thru" in fields:
            fields["expiration_date"] = fields.pop("valid_thru")
        visa_updates = {key: fields.pop(key) for key in list(fields) if key in self._VISA_FIELDS}
        identity = updated_copy(self._identity, fields)
        visa = updated_copy(self._visa, visa_updates)
        self._identity, self._visa = identity, visa

    def _mrz_number(self) -> str:
        if self._visa.use_passport_in_mrz:
            return self._visa.passport_number
        return self._identity.number

    def apply_mrz_fields(self, decoded: dict[str, Any]) -> None:
        if self._visa.use_passport_in_mrz and "number" in decoded:
            decoded = dict(decoded)
            decoded["passport_number"] = decoded.pop("number")
        self.update(**decoded)

    def viz_fields(self) -> dict[str, str]:
        fields = super().viz_fields()
        visa = self._visa
        fields.update(
            valid_thru=fields["expiration_date"],
            place_of_issue=visa.place_of_issue,
            valid_from=to_viz(visa.valid_from),
            number_of_entries=visa.number_of_entries.upper(),
            visa_type=visa.visa_type,
            additional_info=visa.additional_info,
            passport_number=visa.passport_number,
        )
        return fields


class MRVADocument(VisaDocument):
    """Format-A visa, two MRZ lines of 44 characters."""

    layout = MRVA


class MRVBDocument(VisaDocument):
    """Format-B visa, two MRZ lines of 36 characters."""

    layout = MRVB
