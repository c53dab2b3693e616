"""
Pure encoders and decoders for the three zones of a Visible Digital Seal.

Header:    magic, version, C40 authority, C40 identifier and certificate
           reference, issue date, signature date, feature definition,
           document type category.
Message:   tag, length, value entries. V4 lengths are DER, V3 lengths one byte.
Signature: marker 0xFF, DER length, signature bytes.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from icao_mrtd.exceptions import SealFormatError, SealLengthError
from icao_mrtd.logging_config import get_logger
from icao_mrtd.models.identity import DEFAULT_DATE
from icao_mrtd.utils.validation import (
    validate_hex_string,
    validate_identifier_code,
    validate_mrz_string,
)
from icao_mrtd.vds.c40 import c40_decode, c40_encode
from icao_mrtd.vds.dates import DATE_LENGTH, date_to_seal_bytes, seal_bytes_to_date
from icao_mrtd.vds.der import length_to_der_length, read_der_length
from icao_mrtd.vds.types import SIGNATURE_MARKER, VDS_MAGIC, SealVersion

logger = get_logger(__name__)

AUTHORITY_LENGTH = 3
IDENTIFIER_LENGTH = 4
V3_CERT_REFERENCE_LENGTH = 5
MAX_CERT_REFERENCE_LENGTH = 0xFF


class SealHeader(BaseModel):
    """Decoded header zone of a Visible Digital Seal."""

    version: SealVersion = Field(default=SealVersion.V4, description="Header version byte")
    authority_code: str = Field(default="UNK", description="Issuing authority, up to 3 characters")
    identifier_code: str = Field(default="UTSS", description="Country and signer code")
    cert_reference: str = Field(default="00000", description="Hex reference of the signer certificate")
    issue_date: date = Field(default=DEFAULT_DATE)
    signature_date: date = Field(default=DEFAULT_DATE)
    feature_definition: int = Field(default=0x01, ge=1, le=254)
    type_category: int = Field(default=0x01, ge=1, le=254)

    model_config = {"validate_assignment": True, "extra": "forbid"}

    @field_validator("authority_code", mode="before")
    @classmethod
    def validate_authority_code(cls, v: Any) -> str:
        v = str(v).upper()
        message = validate_mrz_string(v, maximum=AUTHORITY_LENGTH)
        if message:
            raise ValueError(message)
        return v

    @field_validator("identifier_code", mode="before")
    @classmethod
    def validate_identifier(cls, v: Any) -> str:
        v = str(v).upper()
        message = validate_identifier_code(v)
        if message:
            raise ValueError(message)
        return v

    @field_validator("cert_reference", mode="before")
    @classmethod
    def validate_cert_reference(cls, v: Any) -> str:
        v = str(v).upper()
        message = validate_hex_string(v, maximum=MAX_CERT_REFERENCE_LENGTH)
        if message:
            raise ValueError(message)
        return v

    @model_validator(mode="after")
    def validate_v3_cert_reference(self) -> SealHeader:
        if self.version == SealVersion.V3 and len(self.cert_reference) != V3_CERT_REFERENCE_LENGTH:
            msg = f"Version 3 certificate references must be {V3_CERT_REFERENCE_LENGTH} characters"
            raise ValueError(msg)
        return self


def _check_version(version: int) -> SealVersion:
    try:
        return SealVersion(version)
    except ValueError:
        msg = f"Unsupported seal version byte {version:#04x}"
        raise SealFormatError(msg) from None


def _signer_block(header: SealHeader) -> str:
    if header.version == SealVersion.V3:
        return header.identifier_code + header.cert_reference
    return f"{header.identifier_code}{len(header.cert_reference):02X}{header.cert_reference}"


def encode_header(header: SealHeader) -> bytes:
    return b"".join(
        (
            bytes([VDS_MAGIC, header.version]),
            c40_encode(header.authority_code.ljust(AUTHORITY_LENGTH, "<")),
            c40_encode(_signer_block(header)),
            date_to_seal_bytes(header.issue_date),
            date_to_seal_bytes(header.signature_date),
            bytes([header.feature_definition, header.type_category]),
        )
    )


def _take(data: bytes, offset: int, size: int, what: str) -> bytes:
    chunk = data[offset:offset + size]
    if len(chunk) != size:
        msg = f"Seal ends inside the {what}: needed {size} bytes at offset {offset}"
        raise SealLengthError(msg)
    return chunk


def _c40_block_size(characters: int) -> int:
    return 2 * math.ceil(characters / 3)


def decode_header(data: bytes, version: int | None = None) -> tuple[SealHeader, int]:
    """
    Decode a header zone from the start of ``data``.

    Args:
        data: Seal bytes beginning with the header
        version: Expected version byte, or None to accept any supported version

    Returns:
        The header and the number of bytes it occupied

    Raises:
        SealFormatError: On a wrong magic byte, version or malformed field
        SealLengthError: If the data ends early or the certificate
            reference length does not match its declared length
    """
    data = bytes(data)
    magic, found_version = _take(data, 0, 2, "magic and version")
    if magic != VDS_MAGIC:
        msg = f"Seal must start with magic byte {VDS_MAGIC:#04x}, found {magic:#04x}"
        raise SealFormatError(msg)
    if version is not None and found_version != version:
        msg = f"Expected seal version byte {version:#04x}, found {found_version:#04x}"
        raise SealFormatError(msg)
    seal_version = _check_version(found_version)
    offset = 2

    authority = c40_decode(_take(data, offset, 2, "authority")).strip()
    offset += 2

    if seal_version == SealVersion.V3:
        block_size = _c40_block_size(IDENTIFIER_LENGTH + V3_CERT_REFERENCE_LENGTH)
        signer = c40_decode(_take(data, offset, block_size, "signer identifier"))
        identifier, cert_reference = signer[:IDENTIFIER_LENGTH], signer[IDENTIFIER_LENGTH:]
    else:
        prefix = c40_decode(_take(data, offset, 4, "signer identifier"))
        identifier, declared = prefix[:IDENTIFIER_LENGTH], prefix[IDENTIFIER_LENGTH:]
        try:
            declared_length = int(declared, 16)
        except ValueError:
            msg = f"Certificate reference length {declared!r} is not hexadecimal"
            raise SealFormatError(msg) from None
        block_size = _c40_block_size(IDENTIFIER_LENGTH + 2 + declared_length)
        signer = c40_decode(_take(data, offset, block_size, "certificate reference"))
        cert_reference = signer[IDENTIFIER_LENGTH + 2:]
        if len(cert_reference) != declared_length:
            msg = (
                f"Certificate reference declares {declared_length} characters "
                f"but {len(cert_reference)} were decoded"
            )
            raise SealLengthError(msg)
    offset += block_size

    issue_date = seal_bytes_to_date(_take(data, offset, DATE_LENGTH, "issue date"))
    offset += DATE_LENGTH
    signature_date = seal_bytes_to_date(_take(data, offset, DATE_LENGTH, "signature date"))
    offset += DATE_LENGTH
    feature_definition, type_category = _take(data, offset, 2, "feature definition and type category")
    offset += 2

    try:
        header = SealHeader(
            version=seal_version,
            authority_code=authority,
            identifier_code=identifier,
            cert_reference=cert_reference,
            issue_date=issue_date,
            signature_date=signature_date,
            feature_definition=feature_definition,
            type_category=type_category,
        )
    except ValueError as exc:
        msg = f"Invalid seal header: {exc}"
        raise SealFormatError(msg) from exc

    logger.debug("Decoded seal header %s from %d bytes", identifier, offset)
    return header, offset


def _encode_length(length: int, version: int) -> bytes:
    if version == SealVersion.V3:
        if length > 0xFF:
            msg = f"Version 3 features are limited to 255 bytes, got {length}"
            raise SealLengthError(msg)
        return bytes([length])
    return length_to_der_length(length)


def encode_message(features: Mapping[int, bytes], version: int = SealVersion.V4) -> bytes:
    """Encode features as tag, length, value entries in mapping order."""
    output = bytearray()
    for tag, value in features.items():
        if not 0 <= tag < SIGNATURE_MARKER:
            msg = f"Feature tag must be between 0x00 and 0xFE, got {tag:#x}"
            raise SealFormatError(msg)
        value = bytes(value)
        output.append(tag)
        output.extend(_encode_length(len(value), version))
        output.extend(value)
    return bytes(output)


def decode_message(
    data: bytes,
    version: int = SealVersion.V4,
    stop_at_signature: bool = False,
) -> tuple[dict[int, bytes], int]:
    """
    Decode tag, length, value entries.

    Args:
        data: Message zone bytes, optionally followed by a signature zone
        version: Seal version byte, choosing DER or single byte lengths
        stop_at_signature: Stop at the 0xFF signature marker

    Returns:
        Features in encounter order and the number of bytes consumed

    Raises:
        SealLengthError: If a declared length runs past the data
        SealFormatError: If a tag appears twice
    """
    data = bytes(data)
    features: dict[int, bytes] = {}
    offset = 0
    while offset < len(data):
        tag = data[offset]
        if stop_at_signature and tag == SIGNATURE_MARKER:
            break
        offset += 1
        if version == SealVersion.V3:
            length = _take(data, offset, 1, f"length of feature {tag:#04x}")[0]
            offset += 1
        else:
            length, consumed = read_der_length(data, offset)
            offset += consumed
        if tag in features:
            msg = f"Feature {tag:#04x} appears more than once in the message zone"
            raise SealFormatError(msg)
        features[tag] = _take(data, offset, length, f"value of feature {tag:#04x}")
        offset += length
    return features, offset


def encode_signature_zone(signature: bytes) -> bytes:
    signature = bytes(signature)
    return bytes([SIGNATURE_MARKER]) + length_to_der_length(len(signature)) + signature


def decode_signature_zone(data: bytes) -> bytes:
    """
    Decode a signature zone that spans all of ``data``.

    Raises:
        SealFormatError: If the zone does not start with the 0xFF marker
        SealLengthError: If the declared length differs from the bytes present
    """
    data = bytes(data)
    if not data or data[0] != SIGNATURE_MARKER:
        msg = f"Signature zone must start with marker {SIGNATURE_MARKER:#04x}"
        raise SealFormatError(msg)
    length, consumed = read_der_length(data, 1)
    signature = data[1 + consumed:]
    if len(signature) != length:
        msg = f"Signature declares {length} bytes but {len(signature)} are present"
        raise SealLengthError(msg)
    return signature


def decode_unsigned_seal(data: bytes, version: int | None = None) -> tuple[SealHeader, dict[int, bytes]]:
    header, offset = decode_header(data, version)
    features, _ = decode_message(data[offset:], header.version)
    return header, features


def decode_signed_seal(
    data: bytes, version: int | None = None
) -> tuple[SealHeader, dict[int, bytes], bytes]:
    """
    Split a signed seal into header, features and signature.

    Raises:
        SealFormatError: If the signature zone is missing
    """
    header, offset = decode_header(data, version)
    features, consumed = decode_message(data[offset:], header.version, stop_at_signature=True)
    offset += consumed
    if offset >= len(data):
        msg = "Signed seal has no signature zone"
        raise SealFormatError(msg)
    return header, features, decode_signature_zone(data[offset:])
