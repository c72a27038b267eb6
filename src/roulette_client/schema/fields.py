"""
Field declarations for record layouts.

A layout is an ordered tuple of FieldSpec entries; order defines the wire
layout. Nested records are referenced by RecordType, never by class, so a
layout is pure data.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Type, TYPE_CHECKING

from ..enums import RecordType
from ..runtime.address import PUBKEY_LENGTH

if TYPE_CHECKING:
    from ..types.base import RouletteRecord


class TypeTag(str, Enum):
    """Wire type of a single field."""

    U8 = "u8"
    U32 = "u32"
    U64 = "u64"
    BOOL = "bool"
    PUBKEY_AS_STRING = "pubkeyAsString"
    STRUCT = "struct"
    VECTOR = "vector"
    ARRAY = "array"


PRIMITIVE_WIDTHS = {
    TypeTag.U8: 1,
    TypeTag.U32: 4,
    TypeTag.U64: 8,
    TypeTag.BOOL: 1,
    TypeTag.PUBKEY_AS_STRING: PUBKEY_LENGTH,
}

# vector length prefix
VECTOR_PREFIX_WIDTH = 4


@dataclass(frozen=True)
class FieldSpec:
    """
    One field of a record layout.

    Attributes:
        name: Python attribute name on the record model
        tag: Wire type
        nested: Nested record type for STRUCT and VECTOR fields
        element: Primitive element tag for ARRAY fields
        length: Element count for ARRAY fields
    """

    name: str
    tag: TypeTag
    nested: Optional[RecordType] = None
    element: Optional[TypeTag] = None
    length: Optional[int] = None

    def __post_init__(self):
        if self.tag in (TypeTag.STRUCT, TypeTag.VECTOR) and self.nested is None:
            raise ValueError(f"Field {self.name}: {self.tag.value} requires a nested record type")
        if self.tag == TypeTag.ARRAY:
            if self.element not in PRIMITIVE_WIDTHS:
                raise ValueError(f"Field {self.name}: array elements must be primitive")
            if self.length is None or self.length < 0:
                raise ValueError(f"Field {self.name}: array requires a non-negative length")


@dataclass(frozen=True)
class RecordLayout:
    """
    Ordered field list for one record type.

    ``discriminant`` is set for instruction arguments; it is the constant
    value of the leading ``instruction`` u8 field.
    """

    record_type: RecordType
    fields: Tuple[FieldSpec, ...]
    model: Type["RouletteRecord"]
    discriminant: Optional[int] = None

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def is_instruction(self) -> bool:
        return self.discriminant is not None


def u8(name: str) -> FieldSpec:
    return FieldSpec(name, TypeTag.U8)


def u64(name: str) -> FieldSpec:
    return FieldSpec(name, TypeTag.U64)


def boolean(name: str) -> FieldSpec:
    return FieldSpec(name, TypeTag.BOOL)


def pubkey(name: str) -> FieldSpec:
    return FieldSpec(name, TypeTag.PUBKEY_AS_STRING)


def struct(name: str, nested: RecordType) -> FieldSpec:
    return FieldSpec(name, TypeTag.STRUCT, nested=nested)


def vector(name: str, nested: RecordType) -> FieldSpec:
    return FieldSpec(name, TypeTag.VECTOR, nested=nested)


def array(name: str, element: TypeTag, length: int) -> FieldSpec:
    return FieldSpec(name, TypeTag.ARRAY, element=element, length=length)
