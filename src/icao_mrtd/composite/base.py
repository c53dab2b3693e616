"""
Documents that carry their identity twice: printed in the MRZ and packed
into a Visible Digital Seal.

A sealed document owns one travel document and one seal. Every mutation is
applied to scratch copies of both, followed by a resynchronisation from the
side that changed, and only then swapped in. A failure anywhere leaves the
previous state untouched.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, ClassVar

from icao_mrtd.documents.travel_document import TravelDocument
from icao_mrtd.exceptions import (
    C40Error,
    FieldValueError,
    MRTDException,
    SealConsistencyError,
    SealFormatError,
)
from icao_mrtd.logging_config import get_logger
from icao_mrtd.mrz.layout import Window
from icao_mrtd.utils.mrz_strings import FILLER, to_viz
from icao_mrtd.utils.validation import validate_hex_string
from icao_mrtd.vds.c40 import c40_decode, c40_encode
from icao_mrtd.vds.digital_seal import DigitalSeal, DigitalSealV4
from icao_mrtd.vds.signing import sign_seal_with_rng
from icao_mrtd.vds.types import MRZ_FEATURE_TAG

logger = get_logger(__name__)

HEX_CODE_LENGTH = 8


class SyncSource(Enum):
    """Which half of a sealed document holds the authoritative values."""

    DOCUMENT = "document"
    SEAL = "seal"


def hex_code_to_bytes(code: str, field: str = "code") -> bytes:
    """
    Pack a hex code of up to 8 digits, dropping leading zero bytes.

    Example:
        >>> hex_code_to_bytes("0A0B").hex()
        '0a0b'
    """
    code = str(code)
    message = validate_hex_string(code, minimum=1, maximum=HEX_CODE_LENGTH)
    if message:
        raise FieldValueError(field, message)
    packed = bytes.fromhex(code.zfill(HEX_CODE_LENGTH))
    return packed.lstrip(b"\x00") or b"\x00"


def bytes_to_hex_code(data: bytes | None) -> str:
    return (data or b"").hex().upper()


def c40_feature(text: str, field: str) -> bytes:
    try:
        return c40_encode(str(text))
    except C40Error as exc:
        raise FieldValueError(field, exc.message) from exc


class DocumentAttribute:
    """An attribute of the travel document; changing it re-derives the seal."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name

    def __set_name__(self, owner: type, name: str) -> None:
        if self.name is None:
            self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return getattr(instance._document, self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        instance._commit(
            SyncSource.DOCUMENT,
            lambda document, seal: setattr(document, self.name, value),
        )


class SealAttribute:
    """A seal header value that does not appear in the MRZ."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name

    def __set_name__(self, owner: type, name: str) -> None:
        if self.name is None:
            self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return getattr(instance._seal, self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        setattr(instance._seal, self.name, value)


class HexCodeFeature:
    """A seal feature holding an issuer defined hex code."""

    def __init__(self, tag: int) -> None:
        self.tag = tag

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return bytes_to_hex_code(instance._seal.get_feature(self.tag))

    def __set__(self, instance: Any, value: str) -> None:
        instance._seal.set_feature(self.tag, hex_code_to_bytes(value, self.name))


class C40Feature:
    """A seal feature holding C40 packed text."""

    def __init__(self, tag: int) -> None:
        self.tag = tag

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return c40_decode(instance._seal.get_feature(self.tag, b"")).rstrip()

    def __set__(self, instance: Any, value: str) -> None:
        instance._seal.set_feature(self.tag, c40_feature(value, self.name))


class SealedDocument:
    """
    Base for travel documents paired with a version 4 digital seal.

    Subclasses pick the document class, the seal type category and which
    windows of the flat MRZ are copied into the seal's MRZ feature.
    """

    document_class: ClassVar[type[TravelDocument]]
    type_category: ClassVar[int]
    mrz_windows: ClassVar[tuple[Window, ...]]
    mrz_feature_tag: ClassVar[int] = MRZ_FEATURE_TAG
    document_defaults: ClassVar[dict[str, Any]] = {}
    # Seal-only and visual-zone-only attributes assigned at construction
    defaults: ClassVar[dict[str, Any]] = {}

    type_code = DocumentAttribute()
    authority_code = DocumentAttribute()
    number = DocumentAttribute()
    birth_date = DocumentAttribute()
    gender_marker = DocumentAttribute()
    expiration_date = DocumentAttribute()
    nationality_code = DocumentAttribute()
    full_name = DocumentAttribute()
    optional_data = DocumentAttribute()
    picture = DocumentAttribute()
    signature_image = DocumentAttribute("signature")
    machine_readable_zone = DocumentAttribute()
    mrz_line1 = DocumentAttribute()
    mrz_line2 = DocumentAttribute()

    identifier_code = SealAttribute()
    cert_reference = SealAttribute()
    issue_date = SealAttribute()
    seal_signature_date = SealAttribute("signature_date")
    seal_signature = SealAttribute("signature")

    def __init__(self, **fields: Any) -> None:
        self._document = self.document_class(**self.document_defaults)
        self._seal = DigitalSealV4(type_category=self.type_category, feature_definition=0x01)
        self.resync(SyncSource.DOCUMENT)
        for name, value in self.defaults.items():
            setattr(self, name, copy.copy(value))
        if fields:
            self.update(**fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._document.machine_readable_zone!r})"

    @property
    def document(self) -> TravelDocument:
        """A copy of the travel document half."""
        return copy.deepcopy(self._document)

    @property
    def seal(self) -> DigitalSeal:
        """A copy of the seal half."""
        return self._seal.copy()

    @property
    def mrz_lines(self) -> list[str]:
        return self._document.mrz_lines

    def update(self, **fields: Any) -> None:
        """
        Assign several attributes; either all of them apply or none does.

        Raises:
            FieldValueError: If an attribute is unknown or a value is rejected
        """
        state = copy.deepcopy(self.__dict__)
        try:
            for name, value in fields.items():
                if name.startswith("_") or not hasattr(self, name):
                    raise FieldValueError(name, "no such field")
                setattr(self, name, value)
        except (MRTDException, ValueError, TypeError, AttributeError):
            self.__dict__.clear()
            self.__dict__.update(state)
            raise

    # Synchronisation

    def resync(self, source: SyncSource) -> None:
        """Re-derive one half from the other."""
        self._commit(source, lambda document, seal: None)

    def _commit(
        self,
        source: SyncSource,
        change: Callable[[TravelDocument, DigitalSeal], None],
    ) -> None:
        document = copy.deepcopy(self._document)
        seal = self._seal.copy()
        change(document, seal)
        if source is SyncSource.DOCUMENT:
            self._sync_seal(document, seal)
        else:
            self._sync_document(document, seal)
        self._document, self._seal = document, seal

    def _sync_seal(self, document: TravelDocument, seal: DigitalSeal) -> None:
        seal.authority_code = document.authority_code
        seal.set_feature(self.mrz_feature_tag, c40_encode(document.project_mrz(self.mrz_windows)))
        self._write_features(document, seal)
        logger.debug("Seal resynchronised from %s", type(document).__name__)

    def _sync_document(self, document: TravelDocument, seal: DigitalSeal) -> None:
        packed = seal.get_feature(self.mrz_feature_tag)
        if packed is None:
            msg = f"Seal has no MRZ feature {self.mrz_feature_tag:#04x}"
            raise SealFormatError(msg)
        text = c40_decode(packed).replace(" ", FILLER)
        decoded = document.decode_mrz_projection(text, self.mrz_windows)

        authority = decoded.get("authority_code")
        if authority is not None and authority.replace(FILLER, "") != seal.authority_code.replace(FILLER, ""):
            msg = (
                f"Seal header authority {seal.authority_code!r} does not match "
                f"the MRZ authority {authority!r}"
            )
            raise SealConsistencyError(msg, details={"header": seal.authority_code, "mrz": authority})

        decoded.update(self._read_features(seal))
        document.apply_mrz_fields(decoded)
        logger.debug("Document resynchronised from seal %s", seal.identifier_code)

    def _write_features(self, document: TravelDocument, seal: DigitalSeal) -> None:
        """Copy document values kept in extra seal features. Override as needed."""

    def _read_features(self, seal: DigitalSeal) -> dict[str, Any]:
        """Document values recovered from extra seal features. Override as needed."""
        return {}

    # Seal zones

    @property
    def header_zone(self) -> bytes:
        return self._seal.header_zone

    @header_zone.setter
    def header_zone(self, value: bytes) -> None:
        def change(document: TravelDocument, seal: DigitalSeal) -> None:
            seal.header_zone = value
            document.authority_code = seal.authority_code

        self._commit(SyncSource.DOCUMENT, change)

    @property
    def message_zone(self) -> bytes:
        return self._seal.message_zone

    @message_zone.setter
    def message_zone(self, value: bytes) -> None:
        self._commit(SyncSource.SEAL, lambda document, seal: setattr(seal, "message_zone", value))

    @property
    def seal_signature_zone(self) -> bytes:
        return self._seal.signature_zone

    @seal_signature_zone.setter
    def seal_signature_zone(self, value: bytes) -> None:
        self._seal.signature_zone = value

    @property
    def unsigned_seal(self) -> bytes:
        return self._seal.unsigned_seal

    @unsigned_seal.setter
    def unsigned_seal(self, value: bytes) -> None:
        self._commit(SyncSource.SEAL, lambda document, seal: setattr(seal, "unsigned_seal", value))

    @property
    def signed_seal(self) -> bytes:
        return self._seal.signed_seal

    @signed_seal.setter
    def signed_seal(self, value: bytes) -> None:
        self._commit(SyncSource.SEAL, lambda document, seal: setattr(seal, "signed_seal", value))

    def sign_with_random_bytes(self, length: int | None = None) -> bytes:
        """Attach a random stand-in signature to the seal."""
        return sign_seal_with_rng(self._seal, length)

    # Visual inspection zone

    viz_attributes: ClassVar[Sequence[str]] = ()

    def viz_fields(self) -> dict[str, str]:
        fields = self._document.viz_fields()
        fields["issue_date"] = to_viz(self.issue_date)
        for name in self.viz_attributes:
            fields[name] = to_viz(getattr(self, name))
        return fields
