from datetime import date

import pytest

from icao_mrtd.composite import CrewCertificate, CrewID, CrewLicense
from icao_mrtd.exceptions import (
    CheckDigitError,
    FieldValueError,
    SealConsistencyError,
    SealFormatError,
)
from icao_mrtd.vds import MRZ_FEATURE_TAG, SealTypeCategory, c40_decode, c40_encode
from tests.fixtures.specimens import SPECIMEN_HOLDER, TD1_SPECIMEN


@pytest.fixture
def crew_license():
    return CrewLicense(type_code="I", number="D23145890", **SPECIMEN_HOLDER)


def test_crew_license_defaults():
    document = CrewLicense()

    assert document.authority == "Unknown"
    assert document.url == "https://example.org/"
    assert document.subauthority_code == "00"
    assert document.seal.type_category == SealTypeCategory.CREW_LICENSE
    assert document.identifier_code == "UTSS"


def test_mrz_feature_holds_projection(crew_license):
    """The seal carries line 1 up to the number check digit, line 2 up to nationality and line 3."""
    packed = crew_license.seal.get_feature(MRZ_FEATURE_TAG)
    expected = TD1_SPECIMEN[0:15] + TD1_SPECIMEN[30:48] + TD1_SPECIMEN[60:90]

    assert crew_license.machine_readable_zone == TD1_SPECIMEN
    assert c40_decode(packed) == expected.replace("<", " ")


def test_unsigned_seal_round_trip(crew_license):
    crew_license.privilege_code = "0A0B"
    copy = CrewLicense()
    copy.unsigned_seal = crew_license.unsigned_seal

    assert copy.unsigned_seal == crew_license.unsigned_seal
    assert copy.number == "D23145890"
    assert copy.full_name == "ERIKSSON, ANNA MARIA"
    assert copy.birth_date == date(1974, 8, 12)
    assert copy.authority_code == "UTO"
    assert copy.privilege_code == "0A0B"


def test_identity_change_updates_seal(crew_license):
    crew_license.number = "A1B2C3"
    copy = CrewLicense()
    copy.unsigned_seal = crew_license.unsigned_seal

    assert copy.number == "A1B2C3"
    assert copy.machine_readable_zone[:15] == crew_license.machine_readable_zone[:15]


def test_authority_code_is_written_to_header(crew_license):
    assert crew_license.seal.authority_code == "UTO"
    crew_license.authority_code = "XXA"
    assert crew_license.seal.authority_code == "XXA"


def test_mrz_line_setter_updates_seal(crew_license):
    crew_license.mrz_line3 = "SMITH<<JOHN".ljust(30, "<")

    copy = CrewLicense()
    copy.unsigned_seal = crew_license.unsigned_seal
    assert copy.full_name == "SMITH, JOHN"


def test_optional_data_is_not_sealed(crew_license):
    crew_license.optional_data = "ABC"
    copy = CrewLicense()
    copy.unsigned_seal = crew_license.unsigned_seal

    assert copy.optional_data == ""


def test_tampered_mrz_feature(crew_license):
    seal = crew_license.seal
    text = c40_decode(seal.get_feature(MRZ_FEATURE_TAG))
    # Position 14 holds the document number check digit
    text = text[:14] + str((int(text[14]) + 1) % 10) + text[15:]
    seal.set_feature(MRZ_FEATURE_TAG, c40_encode(text))

    copy = CrewLicense()
    before = copy.unsigned_seal
    with pytest.raises(CheckDigitError):
        copy.unsigned_seal = seal.unsigned_seal

    assert copy.unsigned_seal == before
    assert copy.number == "111222333"


def test_header_authority_mismatch(crew_license):
    seal = crew_license.seal
    seal.authority_code = "XXA"

    copy = CrewLicense()
    with pytest.raises(SealConsistencyError):
        copy.unsigned_seal = seal.unsigned_seal


def test_missing_mrz_feature(crew_license):
    seal = crew_license.seal
    seal.remove_feature(MRZ_FEATURE_TAG)

    with pytest.raises(SealFormatError):
        CrewLicense().unsigned_seal = seal.unsigned_seal


def test_header_zone_setter_updates_document(crew_license):
    copy = CrewLicense()
    copy.header_zone = crew_license.header_zone

    assert copy.authority_code == "UTO"
    assert copy.mrz_line1.startswith("UNUTO")
    assert c40_decode(copy.seal.get_feature(MRZ_FEATURE_TAG)).startswith("UNUTO")


@pytest.mark.parametrize(
    ("code", "expected"),
    [("0A0B", "0A0B"), ("ABC", "0ABC"), ("0", "00"), ("ffffffff", "FFFFFFFF")],
)
def test_hex_codes(crew_license, code, expected):
    crew_license.subauthority_code = code
    assert crew_license.subauthority_code == expected


@pytest.mark.parametrize("code", ["XYZ", "123456789", ""])
def test_invalid_hex_codes(crew_license, code):
    with pytest.raises(FieldValueError):
        crew_license.privilege_code = code
    assert crew_license.privilege_code == "00"


def test_update_is_atomic(crew_license):
    with pytest.raises(FieldValueError):
        crew_license.update(number="X1", type_code="TOOLONG")
    assert crew_license.number == "D23145890"

    with pytest.raises(FieldValueError):
        crew_license.update(ratings="Boeing 747", no_such_field=1)
    assert crew_license.ratings == "None"


def test_signed_seal_round_trip(crew_license):
    signature = crew_license.sign_with_random_bytes()
    assert len(signature) == 64

    copy = CrewLicense()
    copy.signed_seal = crew_license.signed_seal
    assert copy.seal_signature == signature
    assert copy.number == "D23145890"


def test_crew_license_viz_fields(crew_license):
    viz = crew_license.viz_fields()

    assert viz["privilege"] == "Unknown"
    assert viz["issue_date"] == "29 SEP 2023"
    assert viz["birth_date"] == "12 AUG 1974"


def test_crew_certificate_issue_date():
    certificate = CrewCertificate(employer_code="1234", occupation="Pilot")
    certificate.issue_date = date(2024, 1, 2)

    copy = CrewCertificate()
    copy.unsigned_seal = certificate.unsigned_seal
    assert copy.issue_date == date(2024, 1, 2)
    assert copy.employer_code == "1234"
    assert certificate.viz_fields()["occupation"] == "Pilot"
    assert certificate.viz_fields()["place_of_issue"] == "Zenith, UTO"


def test_crew_id_round_trip():
    badge = CrewID(
        authority_code="UTO",
        number="D23145890",
        expiration_date=date(2012, 4, 15),
        employer_code="0F",
    )
    assert badge.mrz_line2.startswith("<<<<<<0<1204159XXX")

    copy = CrewID()
    copy.unsigned_seal = badge.unsigned_seal
    assert copy.number == "D23145890"
    assert copy.expiration_date == date(2012, 4, 15)
    assert copy.employer_code == "0F"
    assert copy.seal.type_category == SealTypeCategory.CREW_ID


def test_update_rolls_back_on_read_only_attribute(crew_license):
    with pytest.raises(AttributeError):
        crew_license.update(number="X1", document=None)
    assert crew_license.number == "D23145890"
