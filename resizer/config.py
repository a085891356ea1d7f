from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Server
    host: str = Field("0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(3001, description="Listening port")
    log_level: str = Field("INFO", description="Root logging level")

    # LLM provider selection
    llm_provider: str = Field("gemini", description="Copy generator backend: gemini or openai")
    llm_temperature: float = Field(0.7)

    # Gemini
    gemini_api_key: Optional[str] = Field(default=None)
    gemini_model: str = Field("gemini-2.5-flash")

    # OpenAI
    openai_api_key: Optional[str] = Field(default=None)
    openai_model: str = Field("gpt-4o-mini")

    # Download handles
    blob_ttl_seconds: float = Field(600.0, gt=0, description="Lifetime of a download handle.")
    blob_sweep_interval_seconds: float = Field(60.0, gt=0, description="Period of the expiry sweep.")

    # Copy generation quota
    rate_limit_max_requests: int = Field(10, ge=1)
    rate_limit_window_seconds: float = Field(3600.0, gt=0)


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
