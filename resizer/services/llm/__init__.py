from __future__ import annotations

from .base import LLMProvider
from .registry import get_provider

__all__ = [
    "LLMProvider",
    "complete",
    "get_provider",
]


async def complete(prompt: str, *, json_mode: bool = False) -> str:
    """Facade for the configured LLM provider.

    The provider is resolved on first use so a missing API key surfaces as a
    call failure rather than an import error.
    """

    return await get_provider().complete(prompt, json_mode=json_mode)
