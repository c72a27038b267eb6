"""
Record schema: type tags, layouts and the registry that maps record types to them.
"""

from .constructors import construct_record, record_values
from .fields import (
    PRIMITIVE_WIDTHS,
    VECTOR_PREFIX_WIDTH,
    FieldSpec,
    RecordLayout,
    TypeTag,
    array,
    boolean,
    pubkey,
    struct,
    u8,
    u64,
    vector,
)
from .layouts import DEFAULT_REGISTRY, INSTRUCTION_LAYOUTS, STATE_LAYOUTS, build_default_registry
from .registry import TypeRegistry

__all__ = [
    "TypeTag",
    "FieldSpec",
    "RecordLayout",
    "PRIMITIVE_WIDTHS",
    "VECTOR_PREFIX_WIDTH",
    "u8",
    "u64",
    "boolean",
    "pubkey",
    "struct",
    "vector",
    "array",
    "TypeRegistry",
    "DEFAULT_REGISTRY",
    "INSTRUCTION_LAYOUTS",
    "STATE_LAYOUTS",
    "build_default_registry",
    "construct_record",
    "record_values",
]
