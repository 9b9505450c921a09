"""Splitting configuration models. Read-only; no business logic."""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SplitterType(str, Enum):
    """Splitting strategies. Values are the identifiers accepted on the wire."""

    FIXED_SEPARATOR = "CharacterTextSplitter"
    RECURSIVE = "RecursiveCharacterTextSplitter"
    TOKEN = "TokenTextSplitter"
    MARKDOWN = "MarkdownTextSplitter"
    LATEX = "LatexTextSplitter"
    CODE = "CodeSplitter"
    SEMANTIC = "SemanticChunker"


class BreakpointStrategy(str, Enum):
    """How the semantic chunker picks sentence boundaries from similarity scores."""

    PERCENTILE = "percentile"
    STANDARD_DEVIATION = "standard_deviation"
    INTERQUARTILE = "interquartile"
    GRADIENT = "gradient"


DEFAULT_ENCODING_NAME = "cl100k_base"
SUPPORTED_ENCODINGS: tuple[str, ...] = ("cl100k_base", "p50k_base", "r50k_base", "o200k_base")

DEFAULT_CODE_LANGUAGE = "python"


def _alias(snake: str, camel: str) -> AliasChoices:
    return AliasChoices(camel, snake)


class SplitConfiguration(BaseModel):
    """
    How to split one text. Built per request and never mutated.

    chunk_size/chunk_overlap are deliberately not range-constrained here: the
    validator reports every violation at once instead of failing on the first.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    splitter_type: SplitterType = Field(
        ..., validation_alias=_alias("splitter_type", "splitterType"), serialization_alias="splitterType"
    )
    chunk_size: int = Field(
        default=1000, validation_alias=_alias("chunk_size", "chunkSize"), serialization_alias="chunkSize"
    )
    chunk_overlap: int = Field(
        default=200, validation_alias=_alias("chunk_overlap", "chunkOverlap"), serialization_alias="chunkOverlap"
    )
    separator: str | None = Field(default=None, description="Single separator, or comma-delimited list for recursive")
    separators: list[str] | None = Field(default=None, description="Ordered separator priority list")
    encoding_name: str | None = Field(
        default=None,
        validation_alias=_alias("encoding_name", "encodingName"),
        serialization_alias="encodingName",
        description="|".join(SUPPORTED_ENCODINGS),
    )
    language: str | None = Field(default=None, description="Source language for CodeSplitter")
    breakpoint_strategy: BreakpointStrategy | None = Field(
        default=None,
        validation_alias=AliasChoices("breakpointType", "breakpoint_strategy", "breakpointStrategy"),
        serialization_alias="breakpointType",
    )

    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible camelCase dump, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
