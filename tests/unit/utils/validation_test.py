import pytest

from icao_mrtd.utils.nationality_codes import country_name, is_known_code, is_user_assigned_code
from icao_mrtd.utils.validation import (
    stringify_validation_list,
    validate_date_string,
    validate_document_number,
    validate_hex_string,
    validate_identifier_code,
    validate_mrz_string,
)


def test_stringify_validation_list():
    assert stringify_validation_list([]) == ""
    assert stringify_validation_list(["too long"]) == "Too long."
    assert (
        stringify_validation_list(["too long", "too short", "bad characters"])
        == "Too long; too short; and bad characters."
    )


@pytest.mark.parametrize("value", ["", "ABC<123", "abc def"])
def test_validate_mrz_string_accepts(value):
    assert validate_mrz_string(value) == ""


def test_validate_mrz_string_reports_every_problem():
    assert validate_mrz_string("ABC!", maximum=3) == (
        "Length must not be more than 3 characters; "
        "and must only use the characters A-Z, 0-9, ' ', or '<'."
    )
    assert validate_mrz_string("A", minimum=2) == "Length must be at least 2 characters."


def test_validate_hex_string():
    assert validate_hex_string("0aF9") == ""
    assert validate_hex_string("XYZ") == "Must only use the characters 0-9 or A-F."
    assert validate_hex_string("AB", maximum=1) == "Length must not be more than 1 character."


@pytest.mark.parametrize("value", ["UTSS", "UT5S", "ut00"])
def test_validate_identifier_code_accepts(value):
    assert validate_identifier_code(value) == ""


def test_validate_identifier_code_rejects():
    assert validate_identifier_code("U1SS") == (
        "Country code (characters 1-2) must use only characters A-Z."
    )
    assert validate_identifier_code("UTS") == "Full identifier code must be 4 characters long."


def test_validate_date_string():
    assert validate_date_string("2023-09-29") == ""
    assert validate_date_string("2023-02-30") != ""
    assert validate_date_string("20230929") != ""


def test_nationality_codes():
    assert is_known_code("UTO")
    assert country_name("uto") == "Utopia"
    assert is_known_code("XXA")
    assert not is_known_code("JJJ")
    assert is_user_assigned_code("ZZX")
    assert is_user_assigned_code("QMA")
    assert not is_user_assigned_code("JJJ")


def test_validate_document_number():
    assert validate_document_number("L898902C3") == ""
    assert validate_document_number("AB 12") == "Must only use the characters A-Z or 0-9."
    assert validate_document_number("AB<12") == "Must only use the characters A-Z or 0-9."
    assert validate_document_number("1234567890") == "Length must not be more than 9 characters."
