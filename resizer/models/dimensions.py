from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

CANVAS_SIZE = 1000
MIN_DIM = 100
MAX_DIM = 1000
DEFAULT_DIM = 800


class NormalizedDimensions(BaseModel):
    """Target box inside the square canvas plus the padding around it."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=MIN_DIM, le=MAX_DIM)
    height: int = Field(..., ge=MIN_DIM, le=MAX_DIM)
    pad_left: int = Field(..., ge=0)
    pad_right: int = Field(..., ge=0)
    pad_top: int = Field(..., ge=0)
    pad_bottom: int = Field(..., ge=0)
