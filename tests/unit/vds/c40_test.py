import pytest

from icao_mrtd.exceptions import C40Error
from icao_mrtd.vds.c40 import c40_decode, c40_encode


def test_c40_decode_unlatched_trailing_character():
    """A lone trailing character follows the 0xFE unlatch as DataMatrix ASCII."""
    assert c40_decode(bytes([235, 17, 254, 69])) == "XKCD"


def test_c40_encode_unlatched_trailing_character():
    assert c40_encode("XKCD") == bytes([235, 17, 254, 69])


def test_c40_two_trailing_characters_use_shift():
    # 1600 * 14 + 40 * 15 + 0 + 1
    assert c40_encode("AB") == bytes([0x59, 0xD9])
    assert c40_decode(bytes([0x59, 0xD9])) == "AB"


@pytest.mark.parametrize("text", ["", "A", "UTOPIA", "D23145890", "ERIKSSON  ANNA MARIA", "1"])
def test_c40_round_trip(text):
    assert c40_decode(c40_encode(text)) == text


def test_c40_filler_becomes_space():
    assert c40_decode(c40_encode("A<B")) == "A B"
    assert c40_decode(c40_encode("<")) == " "


def test_c40_uppercases():
    assert c40_encode("utopia") == c40_encode("UTOPIA")


@pytest.mark.parametrize("text", ["Zürich", "A-B", "a.b"])
def test_c40_rejects_unsupported_characters(text):
    with pytest.raises(C40Error):
        c40_encode(text)


@pytest.mark.parametrize(
    "data",
    [
        bytes([0xFF, 0xFF]),  # first value above 39
        bytes([0x00, 0x00]),  # zero word
        bytes([0x06, 0x41]),  # value 1 is not in the character set
        bytes([0x59]),  # odd length
        bytes([0xFE, 0x00]),  # unlatched byte outside the alphabet
    ],
)
def test_c40_decode_rejects_corrupt_data(data):
    with pytest.raises(C40Error):
        c40_decode(data)
