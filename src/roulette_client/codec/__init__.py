"""
Roulette Binary Codec Module

Schema-driven binary encoding/decoding of roulette instruction arguments and
account state.

Key components:
- primitives.py: Fixed-width integers, bools, fixed byte arrays and base58 keys
- reader.py / writer.py: Cursor-style reader and writer over the primitives
- compound.py: Inline structs, length-prefixed vectors, fixed arrays
- record_codec.py: RecordCodec driver and the module-level encode/decode
"""

from .primitives import *
from .primitives import __all__ as _primitive_names
from .reader import BinaryReader
from .writer import BinaryWriter
from .options import CodecOptions, MAX_PERMITTED_DATA_LENGTH
from .record_codec import (
    RecordCodec,
    decode,
    decode_instruction,
    encode,
    encoded_size,
    static_size,
)

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "CodecOptions",
    "MAX_PERMITTED_DATA_LENGTH",
    "RecordCodec",
    "decode",
    "decode_instruction",
    "encode",
    "encoded_size",
    "static_size",
] + list(_primitive_names)
