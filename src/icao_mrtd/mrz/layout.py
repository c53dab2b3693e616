"""
Generic machine readable zone layout engine.

An MRZ layout is pure data: a line length and, for every line, a sequence of
segments. Field segments carry slices of rendered field text, check digit
segments protect windows of the flat (newline free) MRZ, and filler segments
carry constant text. One engine composes and parses every document size.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Union

from icao_mrtd.exceptions import CheckDigitError, MRZLengthError
from icao_mrtd.utils.check_digit import generate_mrz_check_digit
from icao_mrtd.utils.mrz_strings import FILLER

Window = tuple[int, int]


@dataclass(frozen=True)
class FieldSegment:
    """``length`` characters of a rendered field, starting at ``offset``."""

    field: str
    length: int
    offset: int = 0


@dataclass(frozen=True)
class CheckDigitSegment:
    """A check digit over the concatenated ``windows`` of the flat MRZ."""

    field: str
    windows: tuple[Window, ...]
    blank_when_empty: bool = False

    @property
    def length(self) -> int:
        return 1


@dataclass(frozen=True)
class FillerSegment:
    text: str

    @property
    def length(self) -> int:
        return len(self.text)


Segment = Union[FieldSegment, CheckDigitSegment, FillerSegment]


@dataclass(frozen=True)
class PlacedSegment:
    start: int
    segment: Segment

    @property
    def end(self) -> int:
        return self.start + self.segment.length


class MRZLayout:
    """Positions of every field and check digit for one document size."""

    def __init__(self, name: str, line_length: int, lines: Sequence[Sequence[Segment]]) -> None:
        self.name = name
        self.line_length = line_length
        self.lines = tuple(tuple(line) for line in lines)

        placements = []
        position = 0
        for index, line in enumerate(self.lines, start=1):
            width = sum(segment.length for segment in line)
            if width != line_length:
                msg = f"{name} line {index} is {width} characters wide, expected {line_length}"
                raise ValueError(msg)
            for segment in line:
                placements.append(PlacedSegment(position, segment))
                position += segment.length
        self.placements = tuple(placements)

        self.check_digits = tuple(
            placed for placed in self.placements if isinstance(placed.segment, CheckDigitSegment)
        )
        fields: dict[str, list[PlacedSegment]] = {}
        for placed in self.placements:
            if isinstance(placed.segment, FieldSegment):
                fields.setdefault(placed.segment.field, []).append(placed)
        self.fields = {
            name: tuple(sorted(parts, key=lambda placed: placed.segment.offset))
            for name, parts in fields.items()
        }

    def __repr__(self) -> str:
        return f"MRZLayout({self.name!r}, {self.line_count}x{self.line_length})"

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def total_length(self) -> int:
        return self.line_count * self.line_length

    def field_length(self, field: str) -> int:
        return sum(placed.segment.length for placed in self.fields[field])

    def line_bounds(self, index: int) -> Window:
        """Flat start and end of zero-based line ``index``."""
        if not 0 <= index < self.line_count:
            msg = f"{self.name} has no line {index + 1}"
            raise IndexError(msg)
        start = index * self.line_length
        return start, start + self.line_length

    def split_lines(self, mrz: str) -> list[str]:
        return [mrz[start:start + self.line_length] for start in range(0, len(mrz), self.line_length)]


def _window_text(mrz: Sequence[str], windows: Iterable[Window]) -> str:
    return "".join("".join(mrz[start:end]) for start, end in windows)


def compose_mrz(layout: MRZLayout, fields: Mapping[str, str]) -> str:
    """
    Build the flat MRZ from rendered field text.

    Args:
        layout: Layout describing the document size
        fields: MRZ text per field, each exactly ``layout.field_length(field)`` long

    Returns:
        The MRZ without line breaks, check digits filled in layout order
    """
    buffer: list[str] = []
    for placed in layout.placements:
        segment = placed.segment
        if isinstance(segment, FieldSegment):
            text = fields[segment.field][segment.offset:segment.offset + segment.length]
            if len(text) != segment.length:
                msg = f"{segment.field} must render to {layout.field_length(segment.field)} characters"
                raise MRZLengthError(msg)
        elif isinstance(segment, FillerSegment):
            text = segment.text
        else:
            text = FILLER
        buffer.extend(text)

    for placed in layout.check_digits:
        segment = placed.segment
        protected = _window_text(buffer, segment.windows)
        digit = generate_mrz_check_digit(protected)
        if segment.blank_when_empty and not protected.strip(FILLER):
            digit = FILLER
        buffer[placed.start] = digit

    return "".join(buffer)


def _verify(layout: MRZLayout, mrz: str, checks: Iterable[PlacedSegment]) -> None:
    for placed in checks:
        segment = placed.segment
        actual = mrz[placed.start]
        if segment.blank_when_empty and actual == FILLER:
            actual = "0"
        expected = generate_mrz_check_digit(_window_text(mrz, segment.windows))
        if actual != expected:
            raise CheckDigitError(segment.field, expected, mrz[placed.start])


def _extract(layout: MRZLayout, mrz: str, fields: Iterable[str]) -> dict[str, str]:
    return {
        field: "".join(mrz[placed.start:placed.end] for placed in layout.fields[field])
        for field in fields
    }


def check_mrz_length(layout: MRZLayout, mrz: str) -> None:
    if len(mrz) != layout.total_length:
        msg = (
            f"{layout.name} MRZ must be {layout.total_length} characters "
            f"({layout.line_count} lines of {layout.line_length}), got {len(mrz)}"
        )
        raise MRZLengthError(msg)


def parse_mrz(layout: MRZLayout, mrz: str) -> dict[str, str]:
    """
    Verify every check digit and return the raw MRZ text of every field.

    Raises:
        MRZLengthError: If the MRZ is not exactly the layout's size
        CheckDigitError: If any check digit does not match
    """
    check_mrz_length(layout, mrz)
    _verify(layout, mrz, layout.check_digits)
    return _extract(layout, mrz, layout.fields)


def parse_mrz_line(layout: MRZLayout, mrz: str, index: int) -> dict[str, str]:
    """
    Verify the check digits printed on one line and return the fields it carries.

    The remaining lines of ``mrz`` are trusted as-is.
    """
    check_mrz_length(layout, mrz)
    start, end = layout.line_bounds(index)
    _verify(layout, mrz, [placed for placed in layout.check_digits if start <= placed.start < end])
    on_line = [
        field
        for field, parts in layout.fields.items()
        if any(start <= placed.start < end for placed in parts)
    ]
    return _extract(layout, mrz, on_line)


def project_mrz(mrz: str, windows: Sequence[Window]) -> str:
    """Concatenate ``windows`` of the flat MRZ."""
    return _window_text(mrz, windows)


def parse_mrz_windows(layout: MRZLayout, text: str, windows: Sequence[Window]) -> dict[str, str]:
    """
    Decode a projection made by :func:`project_mrz`.

    Only check digits whose position and protected windows lie inside the
    projection are verified, and only fields lying wholly inside it are
    returned.

    Raises:
        MRZLengthError: If ``text`` does not match the total window width
        CheckDigitError: If a verifiable check digit does not match
    """
    width = sum(end - start for start, end in windows)
    if len(text) != width:
        msg = f"{layout.name} MRZ projection must be {width} characters, got {len(text)}"
        raise MRZLengthError(msg)

    flat = [FILLER] * layout.total_length
    consumed = 0
    for start, end in windows:
        flat[start:end] = text[consumed:consumed + end - start]
        consumed += end - start
    mrz = "".join(flat)

    def covered(start: int, end: int) -> bool:
        return any(low <= start and end <= high for low, high in windows)

    checks = [
        placed
        for placed in layout.check_digits
        if covered(placed.start, placed.end)
        and all(covered(start, end) for start, end in placed.segment.windows)
    ]
    _verify(layout, mrz, checks)
    inside = [
        field
        for field, parts in layout.fields.items()
        if all(covered(placed.start, placed.end) for placed in parts)
    ]
    return _extract(layout, mrz, inside)
