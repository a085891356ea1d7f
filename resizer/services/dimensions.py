"""Clamp requested box dimensions and compute the canvas padding.

Form fields arrive as text and are parsed leniently: leading whitespace, an
optional sign and the leading run of ASCII digits are kept, anything else is
ignored. Missing, non-numeric or zero values fall back to the default of
800 px. Nothing here raises; every input is coerced.
"""
from __future__ import annotations

import re
from typing import Any

from resizer.models.dimensions import (
    CANVAS_SIZE,
    DEFAULT_DIM,
    MAX_DIM,
    MIN_DIM,
    NormalizedDimensions,
)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_dimension(value: Any, default: int = DEFAULT_DIM) -> int:
    """Return *value* as an int, or *default* when it is absent, non-numeric or zero."""

    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return default
        parsed = int(value)
    else:
        match = _LEADING_INT.match(str(value))
        if match is None:
            return default
        parsed = int(match.group(1))
    return parsed or default


def clamp(value: int, lower: int = MIN_DIM, upper: int = MAX_DIM) -> int:
    return min(upper, max(lower, value))


def split_padding(total: int) -> tuple[int, int]:
    """Split *total* into (leading, trailing); the trailing side takes the odd pixel."""

    leading = total // 2
    return leading, total - leading


def normalize_dimensions(requested_width: Any = None, requested_height: Any = None) -> NormalizedDimensions:
    width = clamp(parse_dimension(requested_width))
    height = clamp(parse_dimension(requested_height))
    pad_left, pad_right = split_padding(CANVAS_SIZE - width)
    pad_top, pad_bottom = split_padding(CANVAS_SIZE - height)
    return NormalizedDimensions(
        width=width,
        height=height,
        pad_left=pad_left,
        pad_right=pad_right,
        pad_top=pad_top,
        pad_bottom=pad_bottom,
    )
