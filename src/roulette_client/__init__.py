"""
Roulette Python Client - Binary Codec

Typed records for the roulette program's instruction arguments and account
state, and the schema-driven codec that maps them to their exact byte layout.
Transport, signing and transaction assembly are left to the caller.
"""

from .enums import *
from .runtime.errors import *
from .runtime.address import decode_address, encode_address, is_valid_address
from .types import *
from .schema import DEFAULT_REGISTRY, FieldSpec, RecordLayout, TypeRegistry, TypeTag
from .codec import (
    BinaryReader,
    BinaryWriter,
    CodecOptions,
    RecordCodec,
    decode,
    decode_instruction,
    encode,
    encoded_size,
    static_size,
)
from .decoders import decode_honeypot, decode_locked_guess, decode_rng, decode_roulette_guess

__version__ = "0.1.0"
__all__ = [
    # Codec entry points
    "decode",
    "encode",
    "decode_instruction",
    "encoded_size",
    "static_size",
    "RecordCodec",
    "CodecOptions",
    "BinaryReader",
    "BinaryWriter",

    # Account decoders
    "decode_rng",
    "decode_honeypot",
    "decode_roulette_guess",
    "decode_locked_guess",

    # Schema
    "TypeRegistry",
    "TypeTag",
    "FieldSpec",
    "RecordLayout",
    "DEFAULT_REGISTRY",

    # Addresses
    "encode_address",
    "decode_address",
    "is_valid_address",

    # Enums
    "RecordType",
    "InstructionKind",
    "AccountVersion",
    "Guess",

    # Records
    "RouletteRecord",
    "InstructionArgs",
    "InitializeArgs",
    "SampleArgs",
    "InitializeHoneypotArgs",
    "WithdrawFromHoneypotArgs",
    "InitializeGuessAccountArgs",
    "PlaceGuessesArgs",
    "SpinArgs",
    "TryCancelArgs",
    "parse_instruction",
    "RNG",
    "Honeypot",
    "LockedGuess",
    "RouletteGuess",

    # Errors
    "ErrorCode",
    "RouletteCodecError",
    "SchemaError",
    "UnknownRecordTypeError",
    "DuplicateRecordTypeError",
    "FieldMismatchError",
    "RegistryFrozenError",
    "CodecError",
    "BufferUnderrunError",
    "InvalidAddressError",
    "LengthOverflowError",
    "ValueOutOfRangeError",
    "InvalidBoolError",
    "TrailingBytesError",
    "UnknownDiscriminantError",
]
