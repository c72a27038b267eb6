"""
Typed record constructors.

Attach field names to position-only wire values and build the record model,
and the reverse: pull the declared field values out of a record for encoding.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from ..runtime.errors import FieldMismatchError
from ..types.base import RouletteRecord
from .fields import RecordLayout


def _check_names(layout: RecordLayout, names) -> None:
    declared = layout.field_names
    missing = [n for n in declared if n not in names]
    extra = sorted(n for n in names if n not in declared)
    if missing or extra:
        raise FieldMismatchError(
            f"Fields for {layout.record_type.value} do not match its layout",
            details={"record_type": layout.record_type.value, "missing": missing, "extra": extra},
        )


def construct_record(layout: RecordLayout, values: Mapping[str, Any]) -> RouletteRecord:
    """
    Build the typed record for a layout from a field-value mapping.

    Raises:
        FieldMismatchError: If fields are missing or extra, or the model rejects a value
    """
    _check_names(layout, values.keys())
    try:
        return layout.model.model_validate(dict(values))
    except ValidationError as e:
        raise FieldMismatchError(
            f"Values rejected by {layout.model.__name__}",
            details={"record_type": layout.record_type.value},
            cause=e,
        )


def record_values(layout: RecordLayout, record: Any) -> Dict[str, Any]:
    """
    Return the declared field values of a record in layout order.

    Accepts a model instance or a plain mapping keyed by field name.
    """
    if isinstance(record, Mapping):
        _check_names(layout, record.keys())
        return {name: record[name] for name in layout.field_names}
    if not isinstance(record, layout.model):
        raise FieldMismatchError(
            f"Expected {layout.model.__name__}, got {type(record).__name__}",
            details={"record_type": layout.record_type.value},
        )
    return {name: getattr(record, name) for name in layout.field_names}
