"""
Codec options.
"""

from __future__ import annotations
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

# Largest account data size the runtime will allocate (10 MiB)
MAX_PERMITTED_DATA_LENGTH = 10 * 1024 * 1024


class CodecOptions(BaseModel):
    """
    Options controlling decode strictness.

    Defaults match how account buffers are read from the chain: over-allocated
    buffers are accepted and vectors are bounded by the account size ceiling.
    """

    max_vector_bytes: int = Field(
        default=MAX_PERMITTED_DATA_LENGTH,
        ge=0,
        alias="maxVectorBytes",
        description="Upper bound on the bytes a declared vector length may claim",
    )
    allow_trailing_bytes: bool = Field(
        default=True,
        alias="allowTrailingBytes",
        description="Accept buffers longer than the decoded record",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump(by_alias=True)
