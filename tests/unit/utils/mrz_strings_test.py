import logging
from datetime import date

import pytest

from icao_mrtd.config import settings
from icao_mrtd.exceptions import MRZFormatError
from icao_mrtd.models.identity import Gender
from icao_mrtd.utils.mrz_strings import (
    date_to_mrz,
    date_to_viz,
    full_name_mrz,
    gender_marker_to_mrz,
    get_full_year_from_string,
    mrz_to_date,
    mrz_to_full_name,
    mrz_to_gender_marker,
    mrz_to_optional_data,
    normalize_mrz_string,
    optional_data_mrz,
    pad_mrz_string,
    to_mrz,
    to_viz,
)


def test_pad_mrz_string():
    assert pad_mrz_string("ab", 5) == "AB<<<"
    assert pad_mrz_string("ABCDE", 5) == "ABCDE"


def test_normalize_mrz_string():
    """Diacritics and apostrophes are dropped, dashes and spaces become filler."""
    assert normalize_mrz_string("ADRIAN-CLAUDE D'EVELEAU") == "ADRIAN<CLAUDE<DEVELEAU"
    assert normalize_mrz_string("Åsa Öberg, Jr") == "ASA<OBERG<JR"


def test_full_name_mrz():
    assert full_name_mrz("Eriksson, Anna Maria", 30) == "ERIKSSON<<ANNA<MARIA<<<<<<<<<<"


def test_full_name_mrz_uses_latin_transliteration():
    assert full_name_mrz("陳, 大文/Chan, Tai Man", 20) == "CHAN<<TAI<MAN<<<<<<<"


def test_full_name_mrz_truncates_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="icao_mrtd"):
        rendered = full_name_mrz("Wolfeschlegelsteinhausen, Hubert", 20)

    assert rendered == "WOLFESCHLEGELSTEINHA"
    assert any("truncated" in record.getMessage() for record in caplog.records)


def test_optional_data_mrz():
    assert optional_data_mrz("ZE184226B", 14) == "ZE184226B<<<<<"
    assert optional_data_mrz("", 3) == "<<<"


def test_dates():
    assert date_to_mrz(date(1974, 8, 12)) == "740812"
    assert date_to_viz(date(2023, 9, 30)) == "30 SEP 2023"
    assert mrz_to_date("740812") == date(1974, 8, 12)


@pytest.mark.parametrize("value", ["741332", "74081", "7408AB"])
def test_mrz_to_date_rejects_invalid_dates(value):
    with pytest.raises(MRZFormatError):
        mrz_to_date(value)


def test_gender_markers():
    assert gender_marker_to_mrz(Gender.UNSPECIFIED) == "<"
    assert gender_marker_to_mrz("F") == "F"
    assert mrz_to_gender_marker("<") is Gender.UNSPECIFIED
    assert mrz_to_gender_marker("M") is Gender.MALE
    with pytest.raises(MRZFormatError):
        mrz_to_gender_marker("Q")


@pytest.mark.parametrize(
    ("two_digit", "full"),
    [("74", "1974"), ("12", "2012"), ("60", "2060"), ("61", "1961"), ("00", "2000"), ("99", "1999")],
)
def test_get_full_year_from_string(two_digit, full):
    """Years strictly above 60 fall in the 1900s."""
    assert get_full_year_from_string(two_digit) == full


def test_get_full_year_from_string_cutoff():
    assert get_full_year_from_string("40", cutoff=30) == "1940"


def test_get_full_year_reads_settings(monkeypatch):
    monkeypatch.setattr(settings, "century_cutoff", 30)
    assert get_full_year_from_string("40") == "1940"


def test_get_full_year_rejects_bad_input():
    with pytest.raises(MRZFormatError):
        get_full_year_from_string("7")


def test_field_decoders():
    assert mrz_to_full_name("ERIKSSON<<ANNA<MARIA<<<<<<") == "ERIKSSON, ANNA MARIA"
    assert mrz_to_full_name("MANN<<<<<<") == "MANN"
    assert mrz_to_optional_data("AB<CD<<<<") == "AB CD"


def test_to_mrz_and_to_viz_dispatch_on_type():
    assert to_mrz(date(2012, 4, 15)) == "120415"
    assert to_mrz(Gender.UNSPECIFIED) == "<"
    assert to_mrz("ab", 4) == "AB<<"
    assert to_viz(date(2012, 4, 15)) == "15 APR 2012"
    assert to_viz(Gender.FEMALE) == "F"
    assert to_viz("Zenith, UTO") == "Zenith, UTO"
    with pytest.raises(TypeError):
        to_mrz(1.5)
