"""Library settings loaded from the environment."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for ingestion, synthesis and the optional generation service.

    Every field can be overridden with a ``FLASHFORGE_``-prefixed environment
    variable or a ``.env`` file.
    """

    # Upload validation
    max_upload_bytes: int = 10_000_000

    # Extraction
    # "placeholder" returns fixed reference text for PDF/DOCX uploads
    extraction_mode: Literal["native", "placeholder"] = "native"
    extraction_timeout: float = 60.0

    # Synthesis
    max_input_chars: int = 10_000
    max_candidate_terms: int = 20
    generator_backend: Literal["fallback", "openai"] = "fallback"

    # Generation service
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    openai_base_url: str | None = None
    generation_timeout: float = 120.0
    generation_max_retries: int = 3
    generation_temperature: float = 0.7

    model_config = SettingsConfigDict(
        env_prefix="FLASHFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
