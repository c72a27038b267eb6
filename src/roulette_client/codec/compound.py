"""
Compound encoders/decoders.

Inline structs, length-prefixed vectors of structs and fixed-length arrays of
primitives. Failures anywhere inside a struct abort the whole struct; the
exception is annotated with the field path and re-raised unchanged.
"""

from __future__ import annotations
from typing import Any, List, Sequence

from ..runtime.errors import (
    BufferUnderrunError,
    LengthOverflowError,
    RouletteCodecError,
    ValueOutOfRangeError,
)
from ..schema.constructors import construct_record, record_values
from ..schema.fields import FieldSpec, RecordLayout, TypeTag
from ..schema.registry import TypeRegistry
from ..types.base import RouletteRecord
from .options import CodecOptions
from .primitives import U32_MAX
from .reader import BinaryReader
from .writer import BinaryWriter

_READERS = {
    TypeTag.U8: BinaryReader.u8,
    TypeTag.U32: BinaryReader.u32le,
    TypeTag.U64: BinaryReader.u64le,
    TypeTag.BOOL: BinaryReader.bool,
    TypeTag.PUBKEY_AS_STRING: BinaryReader.pubkey,
}

_WRITERS = {
    TypeTag.U8: BinaryWriter.u8,
    TypeTag.U32: BinaryWriter.u32le,
    TypeTag.U64: BinaryWriter.u64le,
    TypeTag.BOOL: BinaryWriter.bool,
    TypeTag.PUBKEY_AS_STRING: BinaryWriter.pubkey,
}


# Encoding

def write_struct(writer: BinaryWriter, record: Any, layout: RecordLayout,
                 registry: TypeRegistry) -> None:
    """Write each declared field in order with no separators or padding."""
    values = record_values(layout, record)
    for spec in layout.fields:
        try:
            write_field(writer, spec, values[spec.name], registry)
        except RouletteCodecError as e:
            e.add_field_context(spec.name)
            e.set_record_type(layout.record_type)
            raise


def write_field(writer: BinaryWriter, spec: FieldSpec, value: Any,
                registry: TypeRegistry) -> None:
    if spec.tag in _WRITERS:
        _WRITERS[spec.tag](writer, value)
    elif spec.tag == TypeTag.STRUCT:
        write_struct(writer, value, registry.lookup(spec.nested), registry)
    elif spec.tag == TypeTag.VECTOR:
        write_vector(writer, value, registry.lookup(spec.nested), registry)
    elif spec.tag == TypeTag.ARRAY:
        write_array(writer, value, spec)
    else:
        raise ValueError(f"Unsupported type tag: {spec.tag}")


def write_vector(writer: BinaryWriter, elements: Sequence[Any], element_layout: RecordLayout,
                 registry: TypeRegistry) -> None:
    """Write a u32 element count taken from the sequence itself, then each element."""
    elements = list(elements)
    if len(elements) > U32_MAX:
        raise LengthOverflowError(
            f"Vector of {len(elements)} elements exceeds the u32 length prefix",
            details={"count": len(elements)},
        )
    writer.u32le(len(elements))
    for i, element in enumerate(elements):
        try:
            write_struct(writer, element, element_layout, registry)
        except RouletteCodecError as e:
            e.add_field_context(f"[{i}]")
            raise


def write_array(writer: BinaryWriter, values: Sequence[Any], spec: FieldSpec) -> None:
    values = list(values)
    if len(values) != spec.length:
        raise ValueOutOfRangeError(
            f"Array has {len(values)} elements, expected {spec.length}",
            details={"count": len(values)},
        )
    write = _WRITERS[spec.element]
    for i, value in enumerate(values):
        try:
            write(writer, value)
        except RouletteCodecError as e:
            e.add_field_context(f"[{i}]")
            raise


# Decoding

def read_struct(reader: BinaryReader, layout: RecordLayout, registry: TypeRegistry,
                options: CodecOptions) -> RouletteRecord:
    """Read each declared field in order and build the typed record."""
    values = {}
    for spec in layout.fields:
        try:
            values[spec.name] = read_field(reader, spec, registry, options)
        except RouletteCodecError as e:
            e.add_field_context(spec.name)
            e.set_record_type(layout.record_type)
            raise
    return construct_record(layout, values)


def read_field(reader: BinaryReader, spec: FieldSpec, registry: TypeRegistry,
               options: CodecOptions) -> Any:
    if spec.tag in _READERS:
        return _READERS[spec.tag](reader)
    if spec.tag == TypeTag.STRUCT:
        return read_struct(reader, registry.lookup(spec.nested), registry, options)
    if spec.tag == TypeTag.VECTOR:
        return read_vector(reader, registry.lookup(spec.nested), registry, options)
    if spec.tag == TypeTag.ARRAY:
        return read_array(reader, spec)
    raise ValueError(f"Unsupported type tag: {spec.tag}")


def read_vector(reader: BinaryReader, element_layout: RecordLayout, registry: TypeRegistry,
                options: CodecOptions) -> List[RouletteRecord]:
    """
    Read a u32 count and exactly that many elements.

    The count is checked against the options bound and against the bytes left
    before any element is decoded.
    """
    start = reader.offset
    count = reader.u32le()
    element_min = registry.min_size(element_layout.record_type)
    claimed = count * max(element_min, 1)
    if claimed > options.max_vector_bytes:
        raise LengthOverflowError(
            f"Vector length {count} claims {claimed} bytes, limit is {options.max_vector_bytes}",
            details={"offset": start, "count": count},
        )
    if count * element_min > reader.remaining:
        raise BufferUnderrunError(
            f"Vector of {count} elements needs at least {count * element_min} bytes, "
            f"{reader.remaining} available",
            details={"offset": reader.offset, "count": count,
                     "needed": count * element_min, "available": reader.remaining},
        )

    items = []
    for i in range(count):
        try:
            items.append(read_struct(reader, element_layout, registry, options))
        except RouletteCodecError as e:
            e.add_field_context(f"[{i}]")
            raise
    return items


def read_array(reader: BinaryReader, spec: FieldSpec) -> List[Any]:
    read = _READERS[spec.element]
    items = []
    for i in range(spec.length):
        try:
            items.append(read(reader))
        except RouletteCodecError as e:
            e.add_field_context(f"[{i}]")
            raise
    return items
