"""
ICAO 9303 travel document codec.

Machine readable zones for TD1, TD2, TD3 and visa documents, the C40 and
BER/DER codecs, and Visible Digital Seals kept in step with the documents
they protect.
"""

__version__ = "0.1.0"

from .exceptions import (
    C40Error,
    CheckDigitError,
    FieldValueError,
    FormatError,
    LengthError,
    MRTDException,
    MRZFormatError,
    MRZLengthError,
    SealConsistencyError,
    SealFormatError,
    SealLengthError,
    SemanticError,
)
from .composite import (
    CrewCertificate,
    CrewID,
    CrewLicense,
    EventsMRVA,
    EventsMRVB,
    EventsPassport,
    SyncSource,
)
from .documents import (
    CrewIDDocument,
    MRVADocument,
    MRVBDocument,
    TD1Document,
    TD2Document,
    TD3Document,
)
from .models import DocumentIdentity, Gender, VisaDetails
from .utils.check_digit import generate_mrz_check_digit
from .vds import DigitalSealV3, DigitalSealV4, c40_decode, c40_encode

__all__ = [
    "C40Error",
    "CheckDigitError",
    "CrewCertificate",
    "CrewID",
    "CrewIDDocument",
    "CrewLicense",
    "DigitalSealV3",
    "DigitalSealV4",
    "DocumentIdentity",
    "EventsMRVA",
    "EventsMRVB",
    "EventsPassport",
    "FieldValueError",
    "FormatError",
    "Gender",
    "LengthError",
    "MRTDException",
    "MRVADocument",
    "MRVBDocument",
    "MRZFormatError",
    "MRZLengthError",
    "SealConsistencyError",
    "SealFormatError",
    "SealLengthError",
    "SemanticError",
    "SyncSource",
    "TD1Document",
    "TD2Document",
    "TD3Document",
    "VisaDetails",
    "c40_decode",
    "c40_encode",
    "generate_mrz_check_digit",
]
