"""
Record codec.

Entry points that translate between typed records and their byte layouts:
``decode(record_type, buffer)`` and ``encode(record)``. Both are pure; the
only shared state is the frozen type registry.
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..enums import RecordType
from ..runtime.errors import TrailingBytesError, UnknownDiscriminantError
from ..schema.fields import RecordLayout
from ..schema.layouts import DEFAULT_REGISTRY
from ..schema.registry import TypeRegistry
from ..types.base import RouletteRecord
from . import compound
from .options import CodecOptions
from .reader import BinaryReader
from .writer import BinaryWriter

logger = logging.getLogger(__name__)

LayoutRef = Union[RecordLayout, RecordType, str]


class RecordCodec:
    """
    Schema-driven encoder/decoder bound to one registry.

    Args:
        registry: Frozen type registry (defaults to the roulette layouts)
        options: Decode options
    """

    def __init__(self, registry: Optional[TypeRegistry] = None,
                 options: Optional[CodecOptions] = None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.options = options or CodecOptions()

    def decode(self, record_type: Union[RecordType, str], buffer: bytes) -> RouletteRecord:
        """
        Decode a buffer as the given record type.

        Bytes past the last field are ignored unless the options disallow them.

        Raises:
            UnknownRecordTypeError: If the record type is not registered
            BufferUnderrunError: If the buffer is too short for any field
            CodecError: For any other malformed input
        """
        layout = self.registry.lookup(record_type)
        reader = BinaryReader(buffer)
        record = compound.read_struct(reader, layout, self.registry, self.options)

        if reader.remaining:
            if not self.options.allow_trailing_bytes:
                raise TrailingBytesError(
                    f"{reader.remaining} bytes left after decoding {layout.record_type.value}",
                    details={"record_type": layout.record_type.value,
                             "offset": reader.offset, "trailing": reader.remaining},
                )
            logger.debug(f"Ignoring {reader.remaining} trailing bytes after {layout.record_type.value}")

        logger.debug(f"Decoded {layout.record_type.value} from {reader.offset} bytes")
        return record

    def encode(self, record: RouletteRecord) -> bytes:
        """
        Encode a record in its declared field order.

        Raises:
            UnknownRecordTypeError: If the record's type is not registered
            CodecError: If a field value cannot be written
        """
        layout = self.registry.layout_for(record)
        writer = BinaryWriter()
        compound.write_struct(writer, record, layout, self.registry)
        logger.debug(f"Encoded {layout.record_type.value} to {len(writer)} bytes")
        return writer.to_bytes()

    def decode_instruction(self, buffer: bytes) -> RouletteRecord:
        """
        Decode an instruction buffer, selecting the variant from its first byte.

        Raises:
            BufferUnderrunError: If the buffer is empty
            UnknownDiscriminantError: If the first byte names no instruction
        """
        discriminant = BinaryReader(buffer).peek_u8()
        layout = self.registry.lookup_discriminant(discriminant)
        if layout is None:
            raise UnknownDiscriminantError(
                f"No instruction with discriminant {discriminant}",
                details={"offset": 0, "discriminant": discriminant},
            )
        return self.decode(layout.record_type, buffer)

    def encoded_size(self, record: RouletteRecord) -> int:
        """Number of bytes ``encode`` produces for a record."""
        return len(self.encode(record))

    def static_size(self, record_type: Union[RecordType, str]) -> Optional[int]:
        """Fixed wire size of a record type, or None if it holds a vector."""
        return self.registry.static_size(record_type)

    # Buffer-level struct and vector operations

    def encode_struct(self, record: Any, layout: LayoutRef) -> bytes:
        writer = BinaryWriter()
        compound.write_struct(writer, record, self._layout(layout), self.registry)
        return writer.to_bytes()

    def decode_struct(self, buffer: bytes, offset: int,
                      layout: LayoutRef) -> Tuple[RouletteRecord, int]:
        """Decode one struct at ``offset``; returns the record and the offset after it."""
        reader = BinaryReader(buffer, offset)
        record = compound.read_struct(reader, self._layout(layout), self.registry, self.options)
        return record, reader.offset

    def encode_vector(self, elements: Sequence[Any], element_layout: LayoutRef) -> bytes:
        writer = BinaryWriter()
        compound.write_vector(writer, elements, self._layout(element_layout), self.registry)
        return writer.to_bytes()

    def decode_vector(self, buffer: bytes, offset: int,
                      element_layout: LayoutRef) -> Tuple[List[RouletteRecord], int]:
        """Decode a length-prefixed vector at ``offset``."""
        reader = BinaryReader(buffer, offset)
        items = compound.read_vector(reader, self._layout(element_layout), self.registry,
                                     self.options)
        return items, reader.offset

    def _layout(self, layout: LayoutRef) -> RecordLayout:
        if isinstance(layout, RecordLayout):
            return layout
        return self.registry.lookup(layout)


_default_codec = RecordCodec()


def decode(record_type: Union[RecordType, str], buffer: bytes) -> RouletteRecord:
    """Decode with the default roulette registry."""
    return _default_codec.decode(record_type, buffer)


def encode(record: RouletteRecord) -> bytes:
    """Encode with the default roulette registry."""
    return _default_codec.encode(record)


def decode_instruction(buffer: bytes) -> RouletteRecord:
    return _default_codec.decode_instruction(buffer)


def encoded_size(record: RouletteRecord) -> int:
    return _default_codec.encoded_size(record)


def static_size(record_type: Union[RecordType, str]) -> Optional[int]:
    return _default_codec.static_size(record_type)
