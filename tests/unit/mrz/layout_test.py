import pytest

from icao_mrtd.exceptions import CheckDigitError, MRZLengthError
from icao_mrtd.mrz import layouts
from icao_mrtd.mrz.layout import (
    CheckDigitSegment,
    FieldSegment,
    FillerSegment,
    MRZLayout,
    compose_mrz,
    parse_mrz,
    parse_mrz_windows,
    project_mrz,
)
from tests.fixtures.specimens import TD1_SPECIMEN, TD3_SPECIMEN


@pytest.mark.parametrize(
    ("layout", "lines", "width"),
    [
        (layouts.TD1, 3, 30),
        (layouts.TD2, 2, 36),
        (layouts.TD3, 2, 44),
        (layouts.MRVA, 2, 44),
        (layouts.MRVB, 2, 36),
        (layouts.CREW_ID, 3, 30),
    ],
)
def test_layout_dimensions(layout, lines, width):
    assert layout.line_count == lines
    assert layout.line_length == width
    assert layout.total_length == lines * width


def test_layout_rejects_wrong_line_width():
    with pytest.raises(ValueError):
        MRZLayout("broken", 10, ((FieldSegment("number", 9),),))


def test_split_field_is_joined_in_offset_order():
    assert layouts.TD1.field_length("optional_data") == 26
    raw = parse_mrz(layouts.TD1, TD1_SPECIMEN)
    assert raw["optional_data"] == "<" * 26


def test_compose_and_parse_small_layout():
    layout = MRZLayout(
        "tiny",
        8,
        (
            (FieldSegment("number", 4), CheckDigitSegment("number", ((0, 4),)), FillerSegment("<<<")),
        ),
    )
    mrz = compose_mrz(layout, {"number": "AB12"})

    assert mrz == "AB12" + "8" + "<<<"
    assert parse_mrz(layout, mrz) == {"number": "AB12"}
    with pytest.raises(CheckDigitError):
        parse_mrz(layout, "AB124<<<")
    with pytest.raises(MRZLengthError):
        compose_mrz(layout, {"number": "AB1"})


def test_projection_parses_covered_fields_only():
    windows = ((0, 44), (44, 72))
    text = project_mrz(TD3_SPECIMEN, windows)
    assert text == TD3_SPECIMEN[:72]

    raw = parse_mrz_windows(layouts.TD3, text, windows)
    assert raw["number"] == "L898902C3"
    assert raw["expiration_date"] == "120415"
    assert "optional_data" not in raw


def test_projection_verifies_covered_check_digits():
    windows = ((0, 44), (44, 72))
    text = TD3_SPECIMEN[:53] + "0" + TD3_SPECIMEN[54:72]
    with pytest.raises(CheckDigitError):
        parse_mrz_windows(layouts.TD3, text, windows)
    with pytest.raises(MRZLengthError):
        parse_mrz_windows(layouts.TD3, text[:-1], windows)
