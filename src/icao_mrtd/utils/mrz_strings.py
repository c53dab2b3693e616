"""
Fixed-width string codec for MRZ fields.

Renders identity values into padded MRZ text and decodes MRZ text back into
values. ``to_mrz`` and ``to_viz`` dispatch on the type of a plain value.
"""

from __future__ import annotations

import unicodedata
from datetime import date
from functools import singledispatch

from icao_mrtd.config import settings
from icao_mrtd.exceptions import MRZFormatError
from icao_mrtd.logging_config import get_logger
from icao_mrtd.models.identity import Gender

logger = get_logger(__name__)

FILLER = "<"

MONTH_ABBREVIATIONS = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)


def pad_mrz_string(value: str, length: int) -> str:
    """Right-pad ``value`` with filler to ``length`` and uppercase it."""
    return value.ljust(length, FILLER).upper()


def normalize_mrz_string(value: str) -> str:
    """
    Remove diacritics and punctuation from an MRZ string.

    Example:
        >>> normalize_mrz_string("ADRIAN-CLAUDE D'EVELEAU")
        'ADRIAN<CLAUDE<DEVELEAU'
    """
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    stripped = stripped.replace("'", "").replace("-", FILLER)
    stripped = stripped.replace(" ", FILLER).replace(",", "")
    return stripped.upper()


def _fit(value: str, length: int, label: str) -> str:
    if len(value) > length:
        logger.warning(
            "%s is longer than %d characters and will be truncated in the MRZ: %s",
            label,
            length,
            value,
        )
    return pad_mrz_string(value, length)[:length]


def full_name_mrz(name: str, length: int) -> str:
    """
    Render a ``primary, secondary`` name into a fixed-width MRZ field.

    A name written as ``native/latin`` keeps only the Latin transliteration.
    Names longer than ``length`` are truncated with a warning.
    """
    if "/" in name:
        name = name.split("/", 1)[1].strip()
    normalized = normalize_mrz_string(name.replace(", ", "<<", 1))
    return _fit(normalized, length, "Name")


def optional_data_mrz(data: str, length: int) -> str:
    """Render optional data into a fixed-width MRZ field, truncating with a warning."""
    return _fit(normalize_mrz_string(data), length, "Optional data")


def date_to_mrz(value: date) -> str:
    return value.strftime("%y%m%d")


def date_to_viz(value: date) -> str:
    """Format a date as ``DD MMM YYYY``, e.g. ``30 SEP 2023``."""
    return f"{value.day:02d} {MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def gender_marker_to_mrz(marker: Gender | str) -> str:
    marker = Gender(marker)
    return FILLER if marker is Gender.UNSPECIFIED else marker.value


def mrz_to_gender_marker(value: str) -> Gender:
    if value == FILLER:
        return Gender.UNSPECIFIED
    try:
        return Gender(value)
    except ValueError:
        msg = f"Invalid gender marker in MRZ: {value!r}"
        raise MRZFormatError(msg) from None


def get_full_year_from_string(value: str, cutoff: int | None = None) -> str:
    """
    Resolve a two-digit year to four digits.

    Years strictly greater than the cutoff (60 unless configured otherwise)
    belong to the 1900s, all others to the 2000s.

    Example:
        >>> get_full_year_from_string("74")
        '1974'
        >>> get_full_year_from_string("60")
        '2060'
    """
    if len(value) != 2 or not value.isdigit():
        msg = f"Year must be two digits, got {value!r}"
        raise MRZFormatError(msg)
    if cutoff is None:
        cutoff = settings.century_cutoff
    return f"19{value}" if int(value) > cutoff else f"20{value}"


def mrz_to_date(value: str, label: str = "date") -> date:
    """
    Decode a ``YYMMDD`` MRZ date.

    Raises:
        MRZFormatError: If the field is not a valid calendar date
    """
    if len(value) != 6 or not value.isdigit():
        msg = f"{label} must consist of six digits, got {value!r}"
        raise MRZFormatError(msg)
    year = int(get_full_year_from_string(value[:2]))
    try:
        return date(year, int(value[2:4]), int(value[4:6]))
    except ValueError as exc:
        msg = f"Invalid {label} value: {value}"
        raise MRZFormatError(msg) from exc


def mrz_to_full_name(value: str) -> str:
    """Decode ``PRIMARY<<SECONDARY<NAME`` into ``PRIMARY, SECONDARY NAME``."""
    return value.rstrip(FILLER).replace("<<", ", ", 1).replace(FILLER, " ")


def mrz_to_optional_data(value: str) -> str:
    return value.replace(FILLER, " ").rstrip()


def mrz_to_code(value: str) -> str:
    return value.replace(FILLER, "")


@singledispatch
def to_mrz(value, length: int | None = None) -> str:
    """Render a plain field value as MRZ text."""
    msg = f"No MRZ representation for {type(value).__name__}"
    raise TypeError(msg)


@to_mrz.register
def _(value: str, length: int | None = None) -> str:
    return pad_mrz_string(value, len(value) if length is None else length)


@to_mrz.register
def _(value: date, length: int | None = None) -> str:
    return date_to_mrz(value)


@to_mrz.register
def _(value: Gender, length: int | None = None) -> str:
    return gender_marker_to_mrz(value)


@singledispatch
def to_viz(value) -> str:
    """Render a plain field value for the visual inspection zone."""
    return str(value)


@to_viz.register
def _(value: date) -> str:
    return date_to_viz(value)


@to_viz.register
def _(value: Gender) -> str:
    return value.value
