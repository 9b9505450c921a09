"""Request/response schemas for POST /split and GET /split/splitters."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SplitRequest(BaseModel):
    """
    POST /split request body. text and config are checked by the route, and config stays a
    plain dict, so a missing text, an unknown splitterType or a bad field is answered with a
    400 carrying an error code instead of a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str | None = Field(default=None, description="Text to split; required and non-empty")
    config: dict[str, Any] | None = Field(
        default=None, description="Splitter configuration (splitterType, chunkSize, ...); required"
    )
    source: dict[str, Any] | None = Field(
        default=None, description="Optional source metadata copied into every chunk's metadata"
    )
    embedding_profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("embeddingProfile", "embedding_profile"),
        description="Embedding profile for SemanticChunker; defaults to settings.embedding_profile",
    )


class ErrorResponse(BaseModel):
    """Error body shared by all /split failures."""

    error: str
    code: str
    message: str | None = None
    details: list[str] = Field(default_factory=list)


class SplitterInfo(BaseModel):
    """One entry of GET /split/splitters: a splitter type and its default parameters."""

    splitter_type: str = Field(..., serialization_alias="splitterType")
    defaults: dict[str, Any]
