from __future__ import annotations

import logging

from langchain_core.messages import HumanMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI

from resizer.config import get_settings

from .base import LLMProvider

logger = logging.getLogger(__name__)
settings = get_settings()


class GeminiProvider(LLMProvider):
    name = "gemini"

    def __init__(self) -> None:
        common = dict(
            model=settings.gemini_model,
            google_api_key=settings.gemini_api_key,
            temperature=settings.llm_temperature,
            max_retries=0,
        )
        self._llm = ChatGoogleGenerativeAI(**common)
        self._json_llm = ChatGoogleGenerativeAI(response_mime_type="application/json", **common)

    async def complete(self, prompt: str, *, json_mode: bool = False) -> str:
        llm = self._json_llm if json_mode else self._llm
        chain = llm | StrOutputParser()
        logger.debug("Gemini request model=%s json_mode=%s", settings.gemini_model, json_mode)
        return await chain.ainvoke([HumanMessage(content=prompt)])
