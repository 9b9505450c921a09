"""Configuration validation. Reports every problem at once and never raises."""

from dataclasses import dataclass, field

from docsplit.config.splitting.models import DEFAULT_CODE_LANGUAGE, SplitConfiguration, SplitterType
from docsplit.services.splitting.separators import is_supported_language
from docsplit.services.splitting.tokenizer import is_supported_encoding


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)


def validate_config(config: SplitConfiguration) -> ValidationResult:
    """
    Check size/overlap bounds, plus the language for CodeSplitter and the encoding for
    TokenTextSplitter. Callers reject the request (HTTP 400) when the result is not valid.
    """
    errors: list[str] = []

    if config.chunk_size <= 0:
        errors.append("Chunk size must be greater than 0")
    if config.chunk_overlap < 0:
        errors.append("Chunk overlap must be non-negative")
    if config.chunk_overlap >= config.chunk_size:
        errors.append("Chunk overlap must be less than chunk size")

    if config.splitter_type is SplitterType.CODE:
        language = config.language or DEFAULT_CODE_LANGUAGE
        if not is_supported_language(language):
            errors.append(f"Unsupported language for CodeSplitter: {language}")
    if config.splitter_type is SplitterType.TOKEN and not is_supported_encoding(config.encoding_name):
        errors.append(f"Unsupported encoding for TokenTextSplitter: {config.encoding_name}")

    return ValidationResult(valid=not errors, errors=errors)
