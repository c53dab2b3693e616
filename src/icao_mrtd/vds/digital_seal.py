"""
Stateful Visible Digital Seal objects built on the pure zone codec.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, ClassVar

from icao_mrtd.exceptions import FieldValueError, SealLengthError
from icao_mrtd.logging_config import get_logger
from icao_mrtd.models.attributes import ModelAttribute, updated_copy
from icao_mrtd.vds.codec import (
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
from icao_mrtd.vds.types import SIGNATURE_MARKER, SealVersion

logger = get_logger(__name__)


def _check_features(features: Mapping[int, Any]) -> dict[int, bytes]:
    checked = {}
    for tag, value in features.items():
        if not isinstance(tag, int) or not 0 <= tag < SIGNATURE_MARKER:
            raise FieldValueError("features", f"tag {tag!r} must be an integer from 0x00 to 0xFE")
        try:
            checked[tag] = bytes(value)
        except (TypeError, ValueError) as exc:
            raise FieldValueError("features", f"value of tag {tag:#04x} is not bytes") from exc
    return checked


class DigitalSeal:
    """
    A Visible Digital Seal: header, ordered features and signature.

    Every zone can be read as bytes and assigned from bytes. Assignments are
    decoded completely before any state is replaced.
    """

    version: ClassVar[SealVersion]

    authority_code = ModelAttribute("_header")
    identifier_code = ModelAttribute("_header")
    cert_reference = ModelAttribute("_header")
    issue_date = ModelAttribute("_header")
    signature_date = ModelAttribute("_header")
    feature_definition = ModelAttribute("_header")
    type_category = ModelAttribute("_header")

    def __init__(
        self,
        features: Mapping[int, Any] | None = None,
        signature: bytes = b"",
        **header_fields: Any,
    ) -> None:
        self._header = SealHeader(version=self.version)
        self._features: dict[int, bytes] = {}
        self._signature = b""
        if header_fields:
            self.update(**header_fields)
        if features is not None:
            self.features = features
        self.signature = signature

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.signed_seal.hex()!r})"

    @classmethod
    def from_unsigned_seal(cls, data: bytes) -> DigitalSeal:
        seal = cls()
        seal.unsigned_seal = data
        return seal

    @classmethod
    def from_signed_seal(cls, data: bytes) -> DigitalSeal:
        seal = cls()
        seal.signed_seal = data
        return seal

    def copy(self) -> DigitalSeal:
        return copy.deepcopy(self)

    @property
    def header(self) -> SealHeader:
        return self._header.model_copy()

    def update(self, **fields: Any) -> None:
        """
        Assign several header fields at once.

        Raises:
            FieldValueError: If any value is rejected; no field is changed
        """
        if "version" in fields:
            raise FieldValueError("version", f"fixed to {self.version:#04x} for {type(self).__name__}")
        self._update_model("_header", fields)

    def _update_model(self, model_attr: str, updates: dict[str, Any]) -> None:
        setattr(self, model_attr, updated_copy(getattr(self, model_attr), updates))

    # Message zone features

    @property
    def features(self) -> dict[int, bytes]:
        """A copy of the features in encoding order."""
        return dict(self._features)

    @features.setter
    def features(self, value: Mapping[int, Any]) -> None:
        self._features = _check_features(value)

    def get_feature(self, tag: int, default: bytes | None = None) -> bytes | None:
        return self._features.get(tag, default)

    def set_feature(self, tag: int, value: Any) -> None:
        self._features.update(_check_features({tag: value}))

    def remove_feature(self, tag: int) -> None:
        self._features.pop(tag, None)

    @property
    def signature(self) -> bytes:
        return self._signature

    @signature.setter
    def signature(self, value: bytes) -> None:
        try:
            self._signature = bytes(value)
        except (TypeError, ValueError) as exc:
            raise FieldValueError("signature", "must be bytes") from exc

    # Zones

    @property
    def header_zone(self) -> bytes:
        return encode_header(self._header)

    @header_zone.setter
    def header_zone(self, value: bytes) -> None:
        header, consumed = decode_header(value, self.version)
        if consumed != len(value):
            msg = f"Header zone is {consumed} bytes but {len(value)} were given"
            raise SealLengthError(msg)
        self._header = header

    @property
    def message_zone(self) -> bytes:
        return encode_message(self._features, self.version)

    @message_zone.setter
    def message_zone(self, value: bytes) -> None:
        self._features, _ = decode_message(value, self.version)

    @property
    def signature_zone(self) -> bytes:
        return encode_signature_zone(self._signature)

    @signature_zone.setter
    def signature_zone(self, value: bytes) -> None:
        self._signature = decode_signature_zone(value)

    @property
    def unsigned_seal(self) -> bytes:
        """Header and message zones; the bytes a signature covers."""
        return self.header_zone + self.message_zone

    @unsigned_seal.setter
    def unsigned_seal(self, value: bytes) -> None:
        self._header, self._features = decode_unsigned_seal(value, self.version)
        logger.debug("Loaded unsigned seal with %d features", len(self._features))

    @property
    def signed_seal(self) -> bytes:
        return self.unsigned_seal + self.signature_zone

    @signed_seal.setter
    def signed_seal(self, value: bytes) -> None:
        self._header, self._features, self._signature = decode_signed_seal(value, self.version)
        logger.debug("Loaded signed seal with %d features", len(self._features))


class DigitalSealV3(DigitalSeal):
    """Version 3 seal: 5 character certificate reference, one byte feature lengths."""

    version = SealVersion.V3


class DigitalSealV4(DigitalSeal):
    """Version 4 seal: variable certificate reference, DER feature lengths."""

    version = SealVersion.V4
