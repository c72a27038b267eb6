"""
Account decoders.

Shortcuts for the account layouts fetched by clients; account buffers may be
longer than the record and the extra bytes are ignored.
"""

from .codec.record_codec import decode
from .enums import RecordType
from .types.state import RNG, Honeypot, LockedGuess, RouletteGuess


def decode_rng(buffer: bytes) -> RNG:
    return decode(RecordType.RNG, buffer)


def decode_honeypot(buffer: bytes) -> Honeypot:
    return decode(RecordType.HONEYPOT, buffer)


def decode_roulette_guess(buffer: bytes) -> RouletteGuess:
    return decode(RecordType.ROULETTE_GUESS, buffer)


def decode_locked_guess(buffer: bytes) -> LockedGuess:
    return decode(RecordType.LOCKED_GUESS, buffer)


__all__ = ["decode_rng", "decode_honeypot", "decode_roulette_guess", "decode_locked_guess"]
