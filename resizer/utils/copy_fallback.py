"""Placeholder copy used when the generative backend cannot be reached.

The request that asked for copy still succeeds; the form UI shows this
string in place of the generated variants.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

PLACEHOLDER_DESCRIPTION = "(AI description unavailable — check GEMINI_API_KEY in .env)"


def placeholder_description(*, reason: str | None = None) -> str:
    """Return the fixed placeholder, recording *reason* in the logs."""

    if reason:
        logger.warning("Copy generation fallback triggered: %s", reason)
    else:
        logger.warning("Copy generation fallback triggered (no reason provided)")
    return PLACEHOLDER_DESCRIPTION
