"""
Crew documents: TD1 licenses, certificates and ID badges with a digital seal.
"""

from __future__ import annotations

from typing import Any, ClassVar

from icao_mrtd.composite.base import DocumentAttribute, HexCodeFeature, SealedDocument
from icao_mrtd.documents.travel_document import CrewIDDocument, TD1Document
from icao_mrtd.models.identity import DEFAULT_DATE
from icao_mrtd.vds.types import SealTypeCategory

# Line 1 up to the document number check digit, line 2 up to nationality, line 3
TD1_SEAL_WINDOWS = ((0, 15), (30, 48), (60, 90))

DEFAULT_URL = "https://example.org/"


class CrewLicense(SealedDocument):
    """
    Crewmember license.

    Seal features: 0x02 subauthority code, 0x03 privilege code.
    """

    document_class = TD1Document
    type_category = SealTypeCategory.CREW_LICENSE
    mrz_windows = TD1_SEAL_WINDOWS
    defaults: ClassVar[dict[str, Any]] = {
        "authority": "Unknown",
        "privilege": "Unknown",
        "ratings": "None",
        "limitations": "None",
        "url": DEFAULT_URL,
        "subauthority_code": "0",
        "privilege_code": "0",
    }
    viz_attributes = ("authority", "privilege", "ratings", "limitations", "url")

    mrz_line3 = DocumentAttribute()

    subauthority_code = HexCodeFeature(0x02)
    privilege_code = HexCodeFeature(0x03)


class CrewCertificate(SealedDocument):
    """
    Crew member certificate.

    Seal features: 0x02 employer code, 0x03 occupation code. The issue date is
    both printed and stored in the seal header.
    """

    document_class = TD1Document
    type_category = SealTypeCategory.CREW_CERTIFICATE
    mrz_windows = TD1_SEAL_WINDOWS
    defaults: ClassVar[dict[str, Any]] = {
        "employer": "Unknown",
        "occupation": "Unknown",
        "declaration": "Unknown",
        "issue_date": DEFAULT_DATE,
        "place_of_issue": "Zenith, UTO",
        "url": DEFAULT_URL,
        "employer_code": "0",
        "occupation_code": "0",
    }
    viz_attributes = ("employer", "occupation", "declaration", "place_of_issue", "url")

    mrz_line3 = DocumentAttribute()

    employer_code = HexCodeFeature(0x02)
    occupation_code = HexCodeFeature(0x03)


class CrewID(SealedDocument):
    """
    Crew identification badge.

    The MRZ omits date of birth, sex and nationality. Seal feature 0x02
    holds the employer code.
    """

    document_class = CrewIDDocument
    type_category = SealTypeCategory.CREW_ID
    mrz_windows = TD1_SEAL_WINDOWS
    defaults: ClassVar[dict[str, Any]] = {
        "employer": "Unknown",
        "url": DEFAULT_URL,
        "employer_code": "0",
    }
    viz_attributes = ("employer", "url")

    mrz_line3 = DocumentAttribute()

    employer_code = HexCodeFeature(0x02)
