"""Travel document classes for every MRZ size."""

from .travel_document import (
    CrewIDDocument,
    MRZLine,
    TD1Document,
    TD2Document,
    TD3Document,
    TravelDocument,
)
from .visa_document import MRVADocument, MRVBDocument, VisaDocument

__all__ = [
    "CrewIDDocument",
    "MRVADocument",
    "MRVBDocument",
    "MRZLine",
    "TD1Document",
    "TD2Document",
    "TD3Document",
    "TravelDocument",
    "VisaDocument",
]
