import pytest

from icao_mrtd.exceptions import SealFormatError, SealLengthError
from icao_mrtd.vds.der import der_length_to_length, length_to_der_length, read_der_length

DER_LENGTHS = [
    (0, b"\x00"),
    (127, b"\x7f"),
    (128, b"\x81\x80"),
    (255, b"\x81\xff"),
    (256, b"\x82\x01\x00"),
    (65536, b"\x83\x01\x00\x00"),
    (2**32 - 1, b"\x84\xff\xff\xff\xff"),
]


@pytest.mark.parametrize(("length", "encoded"), DER_LENGTHS)
def test_length_to_der_length(length, encoded):
    assert length_to_der_length(length) == encoded
    assert der_length_to_length(encoded) == length


def test_length_to_der_length_limits():
    with pytest.raises(ValueError):
        length_to_der_length(2**32)
    with pytest.raises(ValueError):
        length_to_der_length(-1)


def test_read_der_length_at_offset():
    assert read_der_length(b"\x05\x81\x80\x00", 1) == (128, 2)
    assert read_der_length(b"\x05\x03", 1) == (3, 1)


@pytest.mark.parametrize("encoded", [b"\x81\x05", b"\x81\x7f", b"\x82\x00\x80", b"\x83\x00\x01\x00"])
def test_read_der_length_rejects_non_minimal_long_form(encoded):
    with pytest.raises(SealFormatError):
        read_der_length(encoded)


def test_read_der_length_errors():
    with pytest.raises(SealLengthError):
        read_der_length(b"\x82\x01")
    with pytest.raises(SealLengthError):
        read_der_length(b"", 0)
    with pytest.raises(SealFormatError):
        read_der_length(b"\x80")
    with pytest.raises(SealFormatError):
        read_der_length(b"\x85\x00\x00\x00\x00\x01")


def test_der_length_to_length_rejects_trailing_bytes():
    with pytest.raises(SealLengthError):
        der_length_to_length(b"\x05\x00")
