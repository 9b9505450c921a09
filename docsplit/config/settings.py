"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="docsplit", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")

    # Request limits for POST /split
    max_text_length: int = Field(default=100_000, ge=1, description="Max characters accepted per split request")
    max_chunk_size: int = Field(default=10_000, ge=1, description="Max chunk_size accepted per split request")

    # Embedding provider used by the semantic chunker
    embedding_profile: str = Field(default="active", description="Profile name in config/embedding/static.json")
    openai_api_key: str = Field(default="", description="OpenAI API key for embeddings")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
