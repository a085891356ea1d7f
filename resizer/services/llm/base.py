from __future__ import annotations

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract interface for a text-generation provider."""

    name: str = "abstract"

    @abstractmethod
    async def complete(self, prompt: str, *, json_mode: bool = False) -> str:
        """Send a single user prompt and return the assistant text.

        Parameters
        ----------
        prompt : str
            Full instruction sent as one user message.
        json_mode : bool, optional
            Ask the backend for a JSON-only response where it supports it.
        """
