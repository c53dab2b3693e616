import pytest

from icao_mrtd.exceptions import MRZFormatError
from icao_mrtd.utils.check_digit import generate_mrz_check_digit, verify_mrz_check_digit


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("D23145890", "7"),
        ("362142069", "9"),
        ("L898902C3", "6"),
        ("740812", "2"),
        ("120415", "9"),
        ("ZE184226B<<<<<", "1"),
        ("<<<<<<", "0"),
        ("", "0"),
    ],
)
def test_generate_mrz_check_digit(value, expected):
    """Check digits use the repeating 7-3-1 weights over ICAO character values."""
    assert generate_mrz_check_digit(value) == expected


def test_space_counts_as_filler():
    assert generate_mrz_check_digit("AB CD") == generate_mrz_check_digit("AB<CD")


def test_invalid_character_raises():
    with pytest.raises(MRZFormatError):
        generate_mrz_check_digit("AB-12")


def test_verify_mrz_check_digit():
    assert verify_mrz_check_digit("L898902C3", "6")
    assert not verify_mrz_check_digit("L898902C3", "5")
