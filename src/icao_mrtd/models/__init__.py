"""Data models for travel document holders and visas."""

from .identity import DEFAULT_DATE, DocumentIdentity, Gender
from .visa import VisaDetails

__all__ = [
    "DEFAULT_DATE",
    "DocumentIdentity",
    "Gender",
    "VisaDetails",
]
