"""
Event documents: a TD3 passport and machine readable visas with a digital seal.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from icao_mrtd.composite.base import (
    C40Feature,
    DocumentAttribute,
    HexCodeFeature,
    SealedDocument,
    c40_feature,
)
from icao_mrtd.documents.travel_document import TD3Document, TravelDocument
from icao_mrtd.documents.visa_document import MRVADocument, MRVBDocument
from icao_mrtd.exceptions import FieldValueError
from icao_mrtd.models.identity import DEFAULT_DATE
from icao_mrtd.vds.c40 import c40_decode
from icao_mrtd.vds.digital_seal import DigitalSeal
from icao_mrtd.vds.types import SealTypeCategory

MULTIPLE_ENTRIES = "MULTIPLE"
MAX_FEATURE_BYTE = 254

ENTRIES_TAG = 0x03
DURATION_TAG = 0x04
PASSPORT_NUMBER_TAG = 0x05


class EventsPassport(SealedDocument):
    """
    Passport for event attendees.

    Seal features: 0x02 place of birth, 0x03 subauthority code,
    0x04 endorsements. The issue date is both printed and stored in the seal
    header.
    """

    document_class = TD3Document
    type_category = SealTypeCategory.EVENTS_PASSPORT
    mrz_windows = ((0, 44), (44, 72))
    defaults: ClassVar[dict[str, Any]] = {
        "place_of_birth": "UTOPIA",
        "issue_date": DEFAULT_DATE,
        "subauthority": "Unknown",
        "subauthority_code": "0",
        "endorsements": "None",
    }
    viz_attributes = ("place_of_birth", "subauthority", "endorsements")

    place_of_birth = C40Feature(0x02)
    subauthority_code = HexCodeFeature(0x03)
    endorsements = C40Feature(0x04)


def _entries_to_byte(value: str) -> int:
    if not str(value).strip().isdigit():
        return 0
    entries = int(value)
    if entries > MAX_FEATURE_BYTE:
        raise FieldValueError("number_of_entries", f"must be {MAX_FEATURE_BYTE} or fewer")
    return entries


class EventsVisa(SealedDocument):
    """
    Visa for event attendees.

    Seal features: 0x03 number of entries (0 for multiple), 0x04 duration of
    stay as [days, months, years], 0x05 passport number, 0x06 visa type code,
    0x07 reserved additional feature.
    """

    type_category = SealTypeCategory.EVENTS_VISA
    document_defaults: ClassVar[dict[str, Any]] = {"type_code": "V", "authority_code": "UTO"}
    defaults: ClassVar[dict[str, Any]] = {
        "duration_of_stay": (0, 3, 0),
        "visa_type_code": "0",
        "additional_feature": b"",
        "url": "https://example.org/",
    }
    viz_attributes = ("url",)

    valid_thru = DocumentAttribute()
    place_of_issue = DocumentAttribute()
    valid_from = DocumentAttribute()
    number_of_entries = DocumentAttribute()
    visa_type = DocumentAttribute()
    additional_info = DocumentAttribute()
    passport_number = DocumentAttribute()
    use_passport_in_mrz = DocumentAttribute()

    visa_type_code = HexCodeFeature(0x06)

    @property
    def duration_of_stay(self) -> list[int]:
        return list(self._seal.get_feature(DURATION_TAG, b""))

    @duration_of_stay.setter
    def duration_of_stay(self, value: Sequence[int]) -> None:
        duration = list(value)
        if len(duration) != 3 or not all(
            isinstance(part, int) and 0 <= part <= MAX_FEATURE_BYTE for part in duration
        ):
            raise FieldValueError(
                "duration_of_stay",
                f"must be [days, months, years] with each number from 0 to {MAX_FEATURE_BYTE}",
            )
        self._seal.set_feature(DURATION_TAG, bytes(duration))

    @property
    def additional_feature(self) -> bytes:
        return self._seal.get_feature(0x07, b"")

    @additional_feature.setter
    def additional_feature(self, value: bytes) -> None:
        self._seal.set_feature(0x07, value)

    def _write_features(self, document: TravelDocument, seal: DigitalSeal) -> None:
        seal.set_feature(ENTRIES_TAG, bytes([_entries_to_byte(document.number_of_entries)]))
        seal.set_feature(
            PASSPORT_NUMBER_TAG, c40_feature(document.passport_number, "passport_number")
        )

    def _read_features(self, seal: DigitalSeal) -> dict[str, Any]:
        values: dict[str, Any] = {}
        entries = seal.get_feature(ENTRIES_TAG)
        if entries:
            values["number_of_entries"] = str(entries[0]) if entries[0] else MULTIPLE_ENTRIES
        passport_number = seal.get_feature(PASSPORT_NUMBER_TAG)
        if passport_number is not None:
            values["passport_number"] = c40_decode(passport_number).strip()
        return values


class EventsMRVA(EventsVisa):
    """Format-A event visa; the seal carries MRZ line 1 and the first 28 characters of line 2."""

    document_class = MRVADocument
    mrz_windows = ((0, 44), (44, 72))


class EventsMRVB(EventsVisa):
    """Format-B event visa; the MRZ is stored in seal feature 0x02."""

    document_class = MRVBDocument
    mrz_windows = ((0, 36), (36, 64))
    mrz_feature_tag = 0x02
