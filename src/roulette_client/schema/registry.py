"""
Type registry for record layouts.

Maps each RecordType to its RecordLayout. A registry is populated once and
then frozen; after that it is read-only and safe to share between threads.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterator, Optional, Union

from ..enums import RecordType
from ..runtime.errors import (
    DuplicateRecordTypeError,
    FieldMismatchError,
    RegistryFrozenError,
    UnknownRecordTypeError,
)
from .fields import PRIMITIVE_WIDTHS, VECTOR_PREFIX_WIDTH, RecordLayout, TypeTag

logger = logging.getLogger(__name__)


class TypeRegistry:
    """
    Registry of record layouts keyed by RecordType.

    Lookups are dictionary reads. Registration validates the layout against
    its model so that field names cannot drift from the declared wire order.
    """

    def __init__(self):
        self._layouts: Dict[RecordType, RecordLayout] = {}
        self._by_discriminant: Dict[int, RecordLayout] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, layout: RecordLayout) -> RecordLayout:
        """
        Register a layout.

        Raises:
            RegistryFrozenError: If the registry has been frozen
            DuplicateRecordTypeError: If the record type or discriminant is taken
            FieldMismatchError: If the layout and its model disagree on field names
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {layout.record_type.value}: registry is frozen",
                details={"record_type": layout.record_type.value},
            )
        if layout.record_type in self._layouts:
            raise DuplicateRecordTypeError(
                f"Record type {layout.record_type.value} is already registered",
                details={"record_type": layout.record_type.value},
            )

        model_fields = tuple(layout.model.model_fields)
        if set(model_fields) != set(layout.field_names):
            raise FieldMismatchError(
                f"Layout for {layout.record_type.value} does not match {layout.model.__name__}",
                details={
                    "record_type": layout.record_type.value,
                    "layout_fields": list(layout.field_names),
                    "model_fields": list(model_fields),
                },
            )

        if layout.discriminant is not None:
            first = layout.fields[0] if layout.fields else None
            if first is None or first.tag != TypeTag.U8:
                raise FieldMismatchError(
                    f"Instruction {layout.record_type.value} must start with a u8 discriminant",
                    details={"record_type": layout.record_type.value},
                )
            taken = self._by_discriminant.get(layout.discriminant)
            if taken is not None:
                raise DuplicateRecordTypeError(
                    f"Discriminant {layout.discriminant} already used by {taken.record_type.value}",
                    details={"record_type": layout.record_type.value,
                             "discriminant": layout.discriminant},
                )
            self._by_discriminant[layout.discriminant] = layout

        self._layouts[layout.record_type] = layout
        logger.debug(f"Registered {layout.record_type.value} ({len(layout.fields)} fields)")
        return layout

    def freeze(self) -> "TypeRegistry":
        """
        Verify nested references and make the registry read-only.

        Raises:
            UnknownRecordTypeError: If a field refers to an unregistered record type
            FieldMismatchError: If an inline struct field is not statically sized
        """
        for layout in self._layouts.values():
            for spec in layout.fields:
                if spec.nested is None:
                    continue
                if spec.nested not in self._layouts:
                    raise UnknownRecordTypeError(
                        f"{layout.record_type.value}.{spec.name} refers to "
                        f"unregistered {spec.nested.value}",
                        details={"record_type": layout.record_type.value, "field": spec.name},
                    )
                if spec.tag == TypeTag.STRUCT and self.static_size(spec.nested) is None:
                    raise FieldMismatchError(
                        f"{layout.record_type.value}.{spec.name}: inline struct "
                        f"{spec.nested.value} must have a fixed size",
                        details={"record_type": layout.record_type.value, "field": spec.name},
                    )
        self._frozen = True
        logger.debug(f"Registry frozen with {len(self._layouts)} record types")
        return self

    def lookup(self, record_type: Union[RecordType, str]) -> RecordLayout:
        """
        Return the layout for a record type.

        Raises:
            UnknownRecordTypeError: If the record type is not registered
        """
        key = _normalize(record_type)
        layout = self._layouts.get(key) if key is not None else None
        if layout is None:
            raise UnknownRecordTypeError(
                f"Unknown record type: {record_type!r}",
                details={"record_type": str(getattr(record_type, "value", record_type))},
            )
        return layout

    def lookup_discriminant(self, discriminant: int) -> Optional[RecordLayout]:
        return self._by_discriminant.get(discriminant)

    def layout_for(self, instance: Any) -> RecordLayout:
        """Return the layout for a record instance via its declared record type."""
        record_type = getattr(type(instance), "record_type", None)
        if record_type is None:
            raise UnknownRecordTypeError(
                f"{type(instance).__name__} does not declare a record type",
                details={"record_type": type(instance).__name__},
            )
        layout = self.lookup(record_type)
        if not isinstance(instance, layout.model):
            raise FieldMismatchError(
                f"{type(instance).__name__} is not a {layout.model.__name__}",
                details={"record_type": layout.record_type.value},
            )
        return layout

    def static_size(self, record_type: Union[RecordType, str]) -> Optional[int]:
        """Wire size of a record type, or None when it contains a vector."""
        layout = self.lookup(record_type)
        total = 0
        for spec in layout.fields:
            if spec.tag in PRIMITIVE_WIDTHS:
                total += PRIMITIVE_WIDTHS[spec.tag]
            elif spec.tag == TypeTag.ARRAY:
                total += PRIMITIVE_WIDTHS[spec.element] * spec.length
            elif spec.tag == TypeTag.STRUCT:
                nested = self.static_size(spec.nested)
                if nested is None:
                    return None
                total += nested
            else:
                return None
        return total

    def min_size(self, record_type: Union[RecordType, str]) -> int:
        """Smallest possible wire size; every vector counted as empty."""
        layout = self.lookup(record_type)
        total = 0
        for spec in layout.fields:
            if spec.tag in PRIMITIVE_WIDTHS:
                total += PRIMITIVE_WIDTHS[spec.tag]
            elif spec.tag == TypeTag.ARRAY:
                total += PRIMITIVE_WIDTHS[spec.element] * spec.length
            elif spec.tag == TypeTag.STRUCT:
                total += self.min_size(spec.nested)
            else:
                total += VECTOR_PREFIX_WIDTH
        return total

    def __contains__(self, record_type: Any) -> bool:
        return _normalize(record_type) in self._layouts

    def __len__(self) -> int:
        return len(self._layouts)

    def __iter__(self) -> Iterator[RecordType]:
        return iter(self._layouts)


def _normalize(record_type: Any) -> Optional[RecordType]:
    if isinstance(record_type, RecordType):
        return record_type
    try:
        return RecordType(record_type)
    except ValueError:
        return None
