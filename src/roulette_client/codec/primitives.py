"""
Primitive encoders/decoders.

Fixed-width little-endian unsigned integers, single-byte bools, fixed-length
byte arrays and the 32-byte public key <-> base58 text codec. Every decoder
takes ``(buffer, offset)`` and returns ``(value, new_offset)``.
"""

from __future__ import annotations
import struct
from typing import Tuple

from ..runtime.address import PUBKEY_LENGTH, decode_address, encode_address
from ..runtime.errors import BufferUnderrunError, InvalidBoolError, ValueOutOfRangeError

U8_MAX = 0xFF
U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


def _require(buffer: bytes, offset: int, width: int) -> None:
    available = len(buffer) - offset
    if offset < 0 or available < width:
        raise BufferUnderrunError(
            f"Need {width} bytes at offset {offset}, {max(available, 0)} available",
            details={"offset": offset, "needed": width, "available": max(available, 0)},
        )


def _check_range(value: int, maximum: int, kind: str) -> None:
    # bool is an int subclass but never a valid integer field value
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueOutOfRangeError(f"{kind} value must be an int, got {type(value).__name__}",
                                   details={"value": value})
    if value < 0 or value > maximum:
        raise ValueOutOfRangeError(f"{kind} value {value} outside 0..{maximum}",
                                   details={"value": value})


def encode_u8(value: int) -> bytes:
    """Encode an unsigned 8-bit integer."""
    _check_range(value, U8_MAX, "u8")
    return bytes((value,))


def decode_u8(buffer: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode an unsigned 8-bit integer."""
    _require(buffer, offset, 1)
    return buffer[offset], offset + 1


def encode_u32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer, little-endian."""
    _check_range(value, U32_MAX, "u32")
    return _U32.pack(value)


def decode_u32(buffer: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode an unsigned 32-bit little-endian integer."""
    _require(buffer, offset, 4)
    return _U32.unpack_from(buffer, offset)[0], offset + 4


def encode_u64(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer, little-endian.

    Python ints are arbitrary precision so the full 0..2**64-1 range is exact.
    """
    _check_range(value, U64_MAX, "u64")
    return _U64.pack(value)


def decode_u64(buffer: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode an unsigned 64-bit little-endian integer."""
    _require(buffer, offset, 8)
    return _U64.unpack_from(buffer, offset)[0], offset + 8


def encode_bool(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"


def decode_bool(buffer: bytes, offset: int = 0) -> Tuple[bool, int]:
    """Decode a single-byte bool; only 0 and 1 are accepted."""
    raw, new_offset = decode_u8(buffer, offset)
    if raw > 1:
        raise InvalidBoolError(f"Bool byte must be 0 or 1, got {raw}",
                               details={"offset": offset, "value": raw})
    return raw == 1, new_offset


def encode_fixed_bytes(value: bytes, length: int) -> bytes:
    """Write exactly ``length`` bytes with no prefix."""
    if len(value) != length:
        raise ValueOutOfRangeError(f"Expected {length} bytes, got {len(value)}",
                                   details={"length": len(value)})
    return bytes(value)


def decode_fixed_bytes(buffer: bytes, offset: int, length: int) -> Tuple[bytes, int]:
    """Read exactly ``length`` bytes."""
    _require(buffer, offset, length)
    return bytes(buffer[offset:offset + length]), offset + length


def encode_pubkey_as_string(address: str) -> bytes:
    """
    Encode base58 address text as its 32 raw bytes.

    Raises:
        InvalidAddressError: If the text is not a valid 32-byte base58 key
    """
    return decode_address(address)


def decode_pubkey_as_string(buffer: bytes, offset: int = 0) -> Tuple[str, int]:
    """Read 32 raw bytes and render them as base58 text."""
    raw, new_offset = decode_fixed_bytes(buffer, offset, PUBKEY_LENGTH)
    return encode_address(raw), new_offset


__all__ = [
    "U8_MAX",
    "U32_MAX",
    "U64_MAX",
    "encode_u8",
    "decode_u8",
    "encode_u32",
    "decode_u32",
    "encode_u64",
    "decode_u64",
    "encode_bool",
    "decode_bool",
    "encode_fixed_bytes",
    "decode_fixed_bytes",
    "encode_pubkey_as_string",
    "decode_pubkey_as_string",
]
