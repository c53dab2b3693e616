"""
Stand-in seal signing.

Seals are "signed" with random bytes so that the signature zone has a
realistic shape. Nothing here is a cryptographic signature.
"""

from __future__ import annotations

import secrets

from icao_mrtd.config import settings
from icao_mrtd.logging_config import get_logger
from icao_mrtd.vds.digital_seal import DigitalSeal

logger = get_logger(__name__)


def sign_seal_with_rng(seal: DigitalSeal, length: int | None = None) -> bytes:
    """
    Fill the seal's signature with random bytes.

    Args:
        seal: Seal to update in place
        length: Number of bytes; defaults to ``settings.signature_length``

    Returns:
        The new signature
    """
    if length is None:
        length = settings.signature_length
    if length < 1:
        msg = f"Signature length must be positive, got {length}"
        raise ValueError(msg)
    seal.signature = secrets.token_bytes(length)
    logger.debug("Attached %d byte random signature to seal %s", length, seal.identifier_code)
    return seal.signature
