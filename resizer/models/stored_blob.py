from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StoredBlob(BaseModel):
    """An encoded image waiting for its single download."""

    model_config = ConfigDict(frozen=True)

    id: str
    content: bytes
    filename: str
    created_at: float  # monotonic seconds
