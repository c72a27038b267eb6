"""
Base model for typed records.
"""

from __future__ import annotations
from typing import Annotated, Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, Field

from ..enums import RecordType

U8 = Annotated[int, Field(ge=0, le=0xFF)]
U64 = Annotated[int, Field(ge=0, le=0xFFFFFFFFFFFFFFFF)]


class RouletteRecord(BaseModel):
    """
    Immutable value object decoded from, or encoded to, a fixed byte layout.

    Subclasses declare ``record_type`` so the codec can find their layout
    without inspecting field values.
    """

    record_type: ClassVar[RecordType]

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary for JSON exchange."""
        return self.model_dump(by_alias=True)
