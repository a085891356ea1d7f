from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResizeResponse(BaseModel):
    """Body returned by ``POST /resize``; keys are camelCase for the form UI."""

    model_config = ConfigDict(populate_by_name=True)

    description: Any = None  # list of variants, raw JSON, or placeholder string
    image_id: str | None = Field(default=None, alias="imageId")
    preview_base64: str | None = Field(default=None, alias="previewBase64")


class ErrorResponse(BaseModel):
    error: str
