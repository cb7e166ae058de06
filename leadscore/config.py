"""
leadscore/config.py — Central configuration loaded from environment variables.
All modules import settings from here; never read os.environ directly elsewhere.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── LLM ──────────────────────────────────────────────────────────────────
    openrouter_api_key: str = Field(..., description="OpenRouter API key")
    openrouter_model: str = Field(
        default="google/gemini-2.5-flash",
        description="OpenRouter model identifier used for intent classification",
    )
    openrouter_base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="OpenAI-compatible base URL of the provider",
    )
    llm_temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for the intent classifier",
    )
    llm_max_retries: int = Field(
        default=2,
        ge=0,
        description="Retries performed by the provider client itself (no extra retry layer)",
    )

    # ── Database ──────────────────────────────────────────────────────────────
    database_url: str = Field(..., description="SQLAlchemy database URI (PostgreSQL or SQLite)")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Root log level for API and scripts")


# Shared instance; import this rather than constructing Settings()
settings = Settings()
