"""POST /split: split text into chunks with offsets and statistics. GET /split/splitters: defaults per type."""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsplit.config.logging import get_logger
from docsplit.config.settings import get_settings
from docsplit.config.splitting.models import SplitConfiguration, SplitterType
from docsplit.config.splitting.static import load_split_profiles, resolve_split_config
from docsplit.controllers.schema.split import ErrorResponse, SplitRequest, SplitterInfo
from docsplit.services.embedder.provider import build_embedder
from docsplit.services.splitting.errors import INVALID_CONFIGURATION, SplitFailure
from docsplit.services.splitting.splitter import split_text
from docsplit.services.splitting.validation import validate_config

logger = get_logger(__name__)

router = APIRouter(prefix="/split", tags=["splitting"])

TEXT_REQUIRED = "TEXT_REQUIRED"
TEXT_TOO_LONG = "TEXT_TOO_LONG"


def _error(
    status_code: int, error: str, code: str, message: str | None = None, details: list[str] | None = None
) -> JSONResponse:
    body = ErrorResponse(error=error, code=code, message=message, details=details or [])
    return JSONResponse(content=body.model_dump(exclude_none=True), status_code=status_code)


def _invalid(message: str, details: list[str] | None = None) -> JSONResponse:
    return _error(400, "Invalid configuration", INVALID_CONFIGURATION, message=message, details=details)


@router.post("")
async def split(body: SplitRequest) -> Any:
    """
    Validate the configuration, split the text, and return chunks with metadata and statistics.
    400 for an invalid request or configuration, 502 when the tokenizer or embedding provider fails.
    """
    settings = get_settings()
    if not body.text:
        return _error(400, "Text is required", TEXT_REQUIRED)
    if not body.config:
        return _invalid("Configuration is required")
    if len(body.text) > settings.max_text_length:
        return _error(
            400,
            f"Text is too long. Maximum length is {settings.max_text_length:,} characters",
            TEXT_TOO_LONG,
        )

    try:
        config = resolve_split_config(body.config)
    except ValueError as e:
        return _invalid(str(e))

    validation = validate_config(config)
    if not validation.valid:
        return _invalid("Configuration failed validation", validation.errors)
    if config.chunk_size > settings.max_chunk_size:
        return _invalid(f"Chunk size must not exceed {settings.max_chunk_size}")

    embedder = None
    if config.splitter_type is SplitterType.SEMANTIC:
        try:
            embedder = build_embedder(body.embedding_profile or settings.embedding_profile)
        except ValueError as e:
            return _invalid(str(e))

    try:
        result = await split_text(body.text, config, embedder=embedder, source=body.source)
    except SplitFailure as e:
        logger.warning("Split failed", extra={"splitter_type": config.splitter_type.value, "error": e.message})
        return _error(502, "Failed to split text", e.code, message=e.message)
    except ValueError as e:
        # ConfigurationError raised by a strategy
        return _invalid(str(e))
    return result.to_dict()


@router.get("/splitters", response_model=list[SplitterInfo], response_model_by_alias=True)
async def list_splitters() -> list[SplitterInfo]:
    """Default parameters for every splitter type, as used when a request leaves fields unset."""
    profiles: dict[str, SplitConfiguration] = load_split_profiles()
    return [
        SplitterInfo(splitter_type=t.value, defaults=profiles[t.value].to_wire())
        for t in SplitterType
        if t.value in profiles
    ]
