"""
Binary Writer

Accumulates the little-endian wire form of records. No separators, padding
or alignment are ever written.
"""

import builtins

from . import primitives


class BinaryWriter:
    """
    Binary writer for the little-endian account and instruction layouts.

    Out-of-range integers raise ValueOutOfRangeError instead of being masked.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb = bytearray()

    def __len__(self) -> int:
        return len(self._bb)

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        self._bb += primitives.encode_u8(v)

    def u32le(self, v: int) -> None:
        """
        Write unsigned 32-bit integer in little-endian format.

        Args:
            v: Integer value to write as 32-bit little-endian
        """
        self._bb += primitives.encode_u32(v)

    def u64le(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in little-endian format.

        Args:
            v: Integer value to write as 64-bit little-endian
        """
        self._bb += primitives.encode_u64(v)

    def bool(self, v: bool) -> None:
        self._bb += primitives.encode_bool(v)

    def bytes(self, v: bytes, length: int) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
            length: Exact number of bytes expected
        """
        self._bb += primitives.encode_fixed_bytes(v, length)

    def pubkey(self, address: str) -> None:
        """Write base58 address text as 32 raw bytes."""
        self._bb += primitives.encode_pubkey_as_string(address)

    def to_bytes(self) -> builtins.bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
