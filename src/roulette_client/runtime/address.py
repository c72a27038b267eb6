"""
Base58 address helpers.

Accounts are identified by 32-byte public keys that travel on the wire as raw
bytes and are handled in memory as base58 text.
"""

from typing import Any

import base58

from .errors import InvalidAddressError

PUBKEY_LENGTH = 32
_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def encode_address(raw: bytes) -> str:
    """
    Render a 32-byte public key as base58 text.

    Raises:
        InvalidAddressError: If raw is not exactly 32 bytes
    """
    if not isinstance(raw, (bytes, bytearray)) or len(raw) != PUBKEY_LENGTH:
        raise InvalidAddressError(
            f"Address must be {PUBKEY_LENGTH} bytes",
            details={"length": len(raw) if isinstance(raw, (bytes, bytearray)) else None},
        )
    return base58.b58encode(bytes(raw)).decode("ascii")


def decode_address(text: Any) -> bytes:
    """
    Parse base58 address text into its 32-byte form.

    Raises:
        InvalidAddressError: If text is not base58 or does not decode to 32 bytes
    """
    if not isinstance(text, str) or not text:
        raise InvalidAddressError("Address must be a non-empty string", details={"address": text})
    # b58decode strips whitespace, which would let two strings map to one key
    if not _ALPHABET.issuperset(text):
        raise InvalidAddressError(
            "Address contains characters outside the base58 alphabet",
            details={"address": text},
        )
    raw = base58.b58decode(text)
    if len(raw) != PUBKEY_LENGTH:
        raise InvalidAddressError(
            f"Address decodes to {len(raw)} bytes, expected {PUBKEY_LENGTH}",
            details={"address": text, "length": len(raw)},
        )
    return raw


def is_valid_address(text: Any) -> bool:
    """Check address text without raising."""
    try:
        decode_address(text)
        return True
    except InvalidAddressError:
        return False
