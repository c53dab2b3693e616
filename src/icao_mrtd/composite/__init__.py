"""Travel documents paired with a Visible Digital Seal."""

from .base import (
    SealedDocument,
    SyncSource,
    bytes_to_hex_code,
    hex_code_to_bytes,
)
from .crew import CrewCertificate, CrewID, CrewLicense
from .events import EventsMRVA, EventsMRVB, EventsPassport, EventsVisa

__all__ = [
    "CrewCertificate",
    "CrewID",
    "CrewLicense",
    "EventsMRVA",
    "EventsMRVB",
    "EventsPassport",
    "EventsVisa",
    "SealedDocument",
    "SyncSource",
    "bytes_to_hex_code",
    "hex_code_to_bytes",
]
