"""
Binary Reader

Cursor over an immutable byte buffer. Each read consumes bytes in order and
advances the offset; a read past the end raises BufferUnderrunError and
leaves the offset unchanged.
"""

import builtins

from . import primitives


class BinaryReader:
    """
    Binary reader for the little-endian account and instruction layouts.

    A reader owns its offset exclusively, so independent readers over the
    same buffer never interfere.
    """

    def __init__(self, buf: builtins.bytes, offset: int = 0):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
            offset: Starting offset
        """
        self._buf = bytes(buf)
        self._off = offset

    @property
    def offset(self) -> int:
        """Current read position."""
        return self._off

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return max(len(self._buf) - self._off, 0)

    @property
    def eof(self) -> bool:
        """
        Check if at end of buffer.

        Returns:
            True if at end of buffer
        """
        return self._off >= len(self._buf)

    def u8(self) -> int:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value
        """
        val, self._off = primitives.decode_u8(self._buf, self._off)
        return val

    def u32le(self) -> int:
        """
        Read unsigned 32-bit integer in little-endian format.

        Returns:
            Unsigned 32-bit integer value
        """
        val, self._off = primitives.decode_u32(self._buf, self._off)
        return val

    def u64le(self) -> int:
        """
        Read unsigned 64-bit integer in little-endian format.

        Returns:
            Unsigned 64-bit integer value
        """
        val, self._off = primitives.decode_u64(self._buf, self._off)
        return val

    def bool(self) -> builtins.bool:
        """Read a single-byte bool (0 or 1)."""
        val, self._off = primitives.decode_bool(self._buf, self._off)
        return val

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        out, self._off = primitives.decode_fixed_bytes(self._buf, self._off, n)
        return out

    def pubkey(self) -> str:
        """Read a 32-byte public key and return it as base58 text."""
        val, self._off = primitives.decode_pubkey_as_string(self._buf, self._off)
        return val

    def peek_u8(self) -> int:
        """Read the next byte without consuming it."""
        val, _ = primitives.decode_u8(self._buf, self._off)
        return val
