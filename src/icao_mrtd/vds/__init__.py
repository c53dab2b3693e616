"""Visible Digital Seal codec (ICAO Doc 9303 Part 13)."""

from .c40 import c40_decode, c40_encode
from .codec import (
    SealHeader,
    decode_header,
    decode_message,
    decode_signature_zone,
    decode_signed_seal,
    decode_unsigned_seal,
    encode_header,
    encode_message,
    encode_signature_zone,
)
from .dates import date_to_seal_bytes, seal_bytes_to_date
from .der import der_length_to_length, length_to_der_length, read_der_length
from .digital_seal import DigitalSeal, DigitalSealV3, DigitalSealV4
from .signing import sign_seal_with_rng
from .types import MRZ_FEATURE_TAG, SIGNATURE_MARKER, VDS_MAGIC, SealTypeCategory, SealVersion

__all__ = [
    "MRZ_FEATURE_TAG",
    "SIGNATURE_MARKER",
    "VDS_MAGIC",
    "DigitalSeal",
    "DigitalSealV3",
    "DigitalSealV4",
    "SealHeader",
    "SealTypeCategory",
    "SealVersion",
    "c40_decode",
    "c40_encode",
    "date_to_seal_bytes",
    "decode_header",
    "decode_message",
    "decode_signature_zone",
    "decode_signed_seal",
    "decode_unsigned_seal",
    "der_length_to_length",
    "encode_header",
    "encode_message",
    "encode_signature_zone",
    "length_to_der_length",
    "read_der_length",
    "seal_bytes_to_date",
    "sign_seal_with_rng",
]
