from __future__ import annotations

import logging

from langchain_core.messages import HumanMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_openai import ChatOpenAI

from resizer.config import get_settings

from .base import LLMProvider

logger = logging.getLogger(__name__)
settings = get_settings()


class OpenAIProvider(LLMProvider):
    name = "openai"

    def __init__(self) -> None:
        self._llm = ChatOpenAI(
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            temperature=settings.llm_temperature,
            max_retries=0,
        )

    async def complete(self, prompt: str, *, json_mode: bool = False) -> str:
        # OpenAI's JSON mode only allows top-level objects, so arrays are
        # requested through the prompt alone.
        chain = self._llm | StrOutputParser()
        logger.debug("OpenAI request model=%s json_mode=%s", settings.openai_model, json_mode)
        return await chain.ainvoke([HumanMessage(content=prompt)])
