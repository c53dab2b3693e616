"""Machine readable zone layouts and the engine that composes and parses them."""

from .layout import (
    CheckDigitSegment,
    FieldSegment,
    FillerSegment,
    MRZLayout,
    compose_mrz,
    parse_mrz,
    parse_mrz_line,
    parse_mrz_windows,
    project_mrz,
)
from .layouts import CREW_ID, MRVA, MRVB, TD1, TD2, TD3

__all__ = [
    "CREW_ID",
    "MRVA",
    "MRVB",
    "TD1",
    "TD2",
    "TD3",
    "CheckDigitSegment",
    "FieldSegment",
    "FillerSegment",
    "MRZLayout",
    "compose_mrz",
    "parse_mrz",
    "parse_mrz_line",
    "parse_mrz_windows",
    "project_mrz",
]
