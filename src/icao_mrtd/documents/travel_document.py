"""
Machine readable travel documents (ICAO Doc 9303 Parts 4-6).

A travel document holds one :class:`DocumentIdentity` and renders it through
an MRZ layout. Every assignment is validated against a copy of the identity
before it replaces the current one, so a rejected value changes nothing.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from icao_mrtd.exceptions import MRZLengthError
from icao_mrtd.models.attributes import ModelAttribute, updated_copy
from icao_mrtd.models.identity import DocumentIdentity
from icao_mrtd.mrz.layout import (
    MRZLayout,
    Window,
    compose_mrz,
    parse_mrz,
    parse_mrz_line,
    parse_mrz_windows,
    project_mrz,
)
from icao_mrtd.mrz.layouts import CREW_ID, TD1, TD2, TD3
from icao_mrtd.utils.mrz_strings import (
    FILLER,
    date_to_mrz,
    full_name_mrz,
    gender_marker_to_mrz,
    mrz_to_code,
    mrz_to_date,
    mrz_to_full_name,
    mrz_to_gender_marker,
    mrz_to_optional_data,
    optional_data_mrz,
    pad_mrz_string,
    to_viz,
)


class MRZLine:
    """One line of a document's MRZ, settable on its own."""

    def __init__(self, index: int) -> None:
        self.index = index

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.mrz_lines[self.index]

    def __set__(self, instance: Any, value: str) -> None:
        instance.set_mrz_line(self.index, value)


def _decode_identity_field(field: str, text: str) -> Any:
    if field in ("type_code", "number"):
        return mrz_to_code(text)
    if field in ("birth_date", "expiration_date"):
        return mrz_to_date(text, field)
    if field == "gender_marker":
        return mrz_to_gender_marker(text)
    if field == "full_name":
        return mrz_to_full_name(text)
    if field == "optional_data":
        return mrz_to_optional_data(text)
    return text


class TravelDocument:
    """
    Common fields and MRZ handling for all machine readable travel documents.

    Subclasses choose the MRZ layout; this class is not meant to be used
    directly.
    """

    layout: ClassVar[MRZLayout]

    type_code = ModelAttribute("_identity")
    authority_code = ModelAttribute("_identity")
    number = ModelAttribute("_identity")
    birth_date = ModelAttribute("_identity")
    gender_marker = ModelAttribute("_identity")
    expiration_date = ModelAttribute("_identity")
    nationality_code = ModelAttribute("_identity")
    full_name = ModelAttribute("_identity")
    optional_data = ModelAttribute("_identity")
    picture = ModelAttribute("_identity")
    signature = ModelAttribute("_identity")

    mrz_line1 = MRZLine(0)
    mrz_line2 = MRZLine(1)

    def __init__(self, **fields: Any) -> None:
        self._identity = DocumentIdentity()
        if fields:
            self.update(**fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.machine_readable_zone!r})"

    @property
    def identity(self) -> DocumentIdentity:
        """A copy of the current identity data."""
        return self._identity.model_copy()

    def update(self, **fields: Any) -> None:
        """
        Assign several identity fields at once.

        Raises:
            FieldValueError: If any value is rejected; no field is changed
        """
        self._update_model("_identity", fields)

    def _update_model(self, model_attr: str, updates: dict[str, Any]) -> None:
        setattr(self, model_attr, updated_copy(getattr(self, model_attr), updates))

    # MRZ rendering

    def _mrz_number(self) -> str:
        return self._identity.number

    def mrz_fields(self) -> dict[str, str]:
        """Rendered MRZ text of every field the layout carries."""
        identity = self._identity
        layout = self.layout
        rendered = {
            "type_code": pad_mrz_string(identity.type_code, 2),
            "authority_code": pad_mrz_string(identity.authority_code, 3),
            "number": pad_mrz_string(self._mrz_number().replace(" ", FILLER), 9),
            "birth_date": date_to_mrz(identity.birth_date),
            "gender_marker": gender_marker_to_mrz(identity.gender_marker),
            "expiration_date": date_to_mrz(identity.expiration_date),
            "nationality_code": pad_mrz_string(identity.nationality_code, 3),
            "full_name": full_name_mrz(identity.full_name, layout.field_length("full_name")),
            "optional_data": optional_data_mrz(
                identity.optional_data, layout.field_length("optional_data")
            ),
        }
        return {field: rendered[field] for field in layout.fields}

    @property
    def machine_readable_zone(self) -> str:
        """The MRZ as one string without line breaks."""
        return compose_mrz(self.layout, self.mrz_fields())

    @machine_readable_zone.setter
    def machine_readable_zone(self, value: str) -> None:
        raw = parse_mrz(self.layout, value.replace("\n", ""))
        self.apply_mrz_fields(self.decode_mrz_fields(raw))

    @property
    def mrz_lines(self) -> list[str]:
        return self.layout.split_lines(self.machine_readable_zone)

    def set_mrz_line(self, index: int, value: str) -> None:
        """
        Replace one MRZ line.

        Only the check digits printed on that line are verified and only the
        fields it carries are updated.

        Raises:
            MRZLengthError: If the line is not exactly the layout's line length
            CheckDigitError: If a check digit on the line does not match
        """
        if len(value) != self.layout.line_length:
            msg = (
                f"{self.layout.name} MRZ line {index + 1} must be "
                f"{self.layout.line_length} characters, got {len(value)}"
            )
            raise MRZLengthError(msg)
        lines = self.mrz_lines
        lines[index] = value
        raw = parse_mrz_line(self.layout, "".join(lines), index)
        self.apply_mrz_fields(self.decode_mrz_fields(raw))

    # MRZ decoding

    def decode_mrz_fields(self, raw: dict[str, str]) -> dict[str, Any]:
        """Turn raw MRZ field text into identity values."""
        return {field: _decode_identity_field(field, text) for field, text in raw.items()}

    def apply_mrz_fields(self, decoded: dict[str, Any]) -> None:
        self.update(**decoded)

    def project_mrz(self, windows: Sequence[Window]) -> str:
        return project_mrz(self.machine_readable_zone, windows)

    def decode_mrz_projection(self, text: str, windows: Sequence[Window]) -> dict[str, Any]:
        """
        Decode the fields carried by a partial copy of this document's MRZ.

        Raises:
            MRZLengthError: If ``text`` does not span ``windows``
            CheckDigitError: If a check digit inside the projection does not match
        """
        return self.decode_mrz_fields(parse_mrz_windows(self.layout, text, windows))

    # Visual inspection zone

    def viz_fields(self) -> dict[str, str]:
        """Display strings for the visual inspection zone."""
        identity = self._identity
        return {
            "type_code": identity.type_code.upper(),
            "authority_code": identity.authority_code,
            "number": identity.number,
            "birth_date": to_viz(identity.birth_date),
            "gender_marker": to_viz(identity.gender_marker),
            "expiration_date": to_viz(identity.expiration_date),
            "nationality_code": identity.nationality_code,
            "full_name": identity.full_name,
            "optional_data": identity.optional_data,
        }


class TD1Document(TravelDocument):
    """
    TD1 size document (ID-1 card), three MRZ lines of 30 characters.

    Example:
        >>> document = TD1Document(authority_code="UTO", number="D23145890")
        >>> document.mrz_line1
        'UNUTOD231458907<<<<<<<<<<<<<<<'
    """

    layout = TD1
    mrz_line3 = MRZLine(2)


class TD2Document(TravelDocument):
    """TD2 size document, two MRZ lines of 36 characters."""

    layout = TD2


class TD3Document(TravelDocument):
    """TD3 size document (passport booklet), two MRZ lines of 44 characters."""

    layout = TD3


class CrewIDDocument(TravelDocument):
    """TD1 size crew badge without date of birth, sex or nationality in the MRZ."""

    layout = CREW_ID
    mrz_line3 = MRZLine(2)
