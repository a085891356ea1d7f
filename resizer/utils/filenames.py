"""Download filename helpers."""
from __future__ import annotations

import re

DEFAULT_STEM = "imagen"
MAX_SLUG_LENGTH = 80

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9\-_]")
_EXTENSION = re.compile(r"\.[^.]+$")


def slugify(raw: str, *, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Lowercase, turn whitespace runs into hyphens, keep ``[a-z0-9-_]`` only."""

    slug = _WHITESPACE.sub("-", raw.lower())
    slug = _DISALLOWED.sub("", slug)
    return slug[:max_length]


def strip_extension(filename: str) -> str:
    return _EXTENSION.sub("", filename)


def build_output_filename(product_name: str | None, upload_filename: str | None) -> str:
    """Return ``<slug>.jpg`` for a letterboxed image.

    The product name wins when present; otherwise the uploaded file's name
    without its extension is used. Empty results fall back to ``imagen``.
    """

    if product_name and product_name.strip():
        raw = product_name.strip()
    else:
        raw = strip_extension(upload_filename or "") or DEFAULT_STEM
    return f"{slugify(raw) or DEFAULT_STEM}.jpg"
