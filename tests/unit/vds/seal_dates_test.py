from datetime import date

import pytest

from icao_mrtd.exceptions import SealFormatError
from icao_mrtd.vds.dates import date_to_seal_bytes, seal_bytes_to_date


def test_date_to_seal_bytes():
    """09292023 packs into three big-endian bytes."""
    assert date_to_seal_bytes(date(2023, 9, 29)) == bytes.fromhex("8dc8f7")
    assert seal_bytes_to_date(bytes.fromhex("8dc8f7")) == date(2023, 9, 29)


@pytest.mark.parametrize("value", [date(2007, 4, 15), date(1999, 12, 31), date(2024, 2, 29)])
def test_seal_date_round_trip(value):
    assert seal_bytes_to_date(date_to_seal_bytes(value)) == value


def test_seal_bytes_to_date_rejects_invalid():
    # 13012023 has month 13
    with pytest.raises(SealFormatError):
        seal_bytes_to_date((13012023).to_bytes(3, "big"))
    with pytest.raises(SealFormatError):
        seal_bytes_to_date(b"\x01\x02")
