"""Embedding configuration models. Read-only; no business logic."""

from pydantic import BaseModel, Field


class EmbeddingConfig(BaseModel):
    """Embedding provider and parameters used to embed sentences for semantic chunking."""

    strategy: str = Field(..., description="openai|sentence_transformers|mock")
    model: str = Field(..., description="Model identifier")
    batch_size: int = Field(default=100, ge=1)
    api_key: str | None = Field(default=None, description="OpenAI API key when strategy is openai")
