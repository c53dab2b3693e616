import logging
from datetime import date

import pytest

from icao_mrtd.documents import TD3Document
from icao_mrtd.exceptions import CheckDigitError, MRZLengthError
from tests.fixtures.specimens import TD3_SPECIMEN, TD3_SPECIMEN_LINES


def test_td3_compose_specimen(td3_specimen):
    assert td3_specimen.mrz_lines == list(TD3_SPECIMEN_LINES)


def test_td3_parse_specimen(td3_specimen_mrz):
    document = TD3Document()
    document.machine_readable_zone = td3_specimen_mrz

    assert document.type_code == "P"
    assert document.number == "L898902C3"
    assert document.optional_data == "ZE184226B"
    assert document.birth_date == date(1974, 8, 12)
    assert document.expiration_date == date(2012, 4, 15)
    assert document.machine_readable_zone == td3_specimen_mrz


def test_td3_empty_optional_data_check_digit_is_filler():
    """An all-filler optional data field may carry '<' as its check digit."""
    document = TD3Document(number="L898902C3")
    mrz = document.machine_readable_zone

    assert mrz[86] == "<"

    copy = TD3Document()
    copy.machine_readable_zone = mrz
    assert copy.optional_data == ""


def test_td3_filler_check_digit_rejected_for_data():
    mrz = TD3_SPECIMEN[:86] + "<" + TD3_SPECIMEN[87:]
    document = TD3Document()

    with pytest.raises(CheckDigitError) as exc_info:
        document.machine_readable_zone = mrz

    assert exc_info.value.field == "optional_data"


@pytest.mark.parametrize(
    ("position", "field"),
    [
        (53, "number"),
        (63, "birth_date"),
        (71, "expiration_date"),
        (86, "optional_data"),
        (87, "composite"),
    ],
)
def test_td3_tampered_check_digit(position, field):
    digit = str((int(TD3_SPECIMEN[position]) + 1) % 10)
    mrz = TD3_SPECIMEN[:position] + digit + TD3_SPECIMEN[position + 1:]

    with pytest.raises(CheckDigitError) as exc_info:
        TD3Document().machine_readable_zone = mrz

    assert exc_info.value.field == field


@pytest.mark.parametrize("length", [43, 45])
def test_td3_line_length(td3_specimen, length):
    with pytest.raises(MRZLengthError):
        td3_specimen.mrz_line2 = TD3_SPECIMEN_LINES[1].ljust(length, "<")[:length]


def test_td3_long_name_is_truncated(caplog):
    document = TD3Document(full_name="Wolfeschlegelsteinhausenbergerdorff, Hubert Blaine")

    with caplog.at_level(logging.WARNING, logger="icao_mrtd"):
        line1 = document.mrz_line1

    assert line1 == "UNUNK" + "WOLFESCHLEGELSTEINHAUSENBERGERDORFF<<HU"
    assert any("truncated" in record.getMessage() for record in caplog.records)


def test_td3_unspecified_gender_renders_filler():
    document = TD3Document(gender_marker="X")
    assert document.mrz_line2[20] == "<"

    copy = TD3Document(gender_marker="F")
    copy.machine_readable_zone = document.machine_readable_zone
    assert copy.gender_marker == "X"


def test_td3_transliterated_name():
    document = TD3Document(full_name="Ὀδυσσεύς/Odysseus, Laertiades")
    assert document.mrz_line1.startswith("UNUNKODYSSEUS<<LAERTIADES<")
    assert document.full_name == "Ὀδυσσεύς/Odysseus, Laertiades"


def test_td3_number_round_trip():
    """Document numbers hold only letters and digits, so they survive a parse."""
    document = TD3Document(number="ab12")
    mrz = document.machine_readable_zone

    copy = TD3Document()
    copy.machine_readable_zone = mrz
    assert copy.number == "AB12"
    assert copy.machine_readable_zone == mrz
