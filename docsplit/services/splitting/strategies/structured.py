"""Structure-aware splitting for Markdown, LaTeX and source code via per-format separator tables."""

from docsplit.config.splitting.models import DEFAULT_CODE_LANGUAGE, SplitConfiguration, SplitterType
from docsplit.services.splitting.errors import ConfigurationError
from docsplit.services.splitting.separators import SUPPORTED_LANGUAGES, separators_for
from docsplit.services.splitting.strategies.base import split_recursively


def _structured_chunks(text: str, config: SplitConfiguration, separators: list[str]) -> list[str]:
    return split_recursively(
        text,
        separators,
        config.chunk_size,
        config.chunk_overlap,
        is_separator_regex=True,
    )


def markdown_chunks(text: str, config: SplitConfiguration) -> list[str]:
    """Prefer heading, fence and rule boundaries, then paragraphs, lines, words."""
    return _structured_chunks(text, config, separators_for(SplitterType.MARKDOWN))


def latex_chunks(text: str, config: SplitConfiguration) -> list[str]:
    """Prefer chapter/section and environment boundaries, then math delimiters."""
    return _structured_chunks(text, config, separators_for(SplitterType.LATEX))


def code_chunks(text: str, config: SplitConfiguration) -> list[str]:
    """Prefer the block keywords of config.language (default python)."""
    language = config.language or DEFAULT_CODE_LANGUAGE
    try:
        separators = separators_for(SplitterType.CODE, language)
    except KeyError as e:
        raise ConfigurationError(
            f"Unsupported language for CodeSplitter: {language}. Supported: {', '.join(SUPPORTED_LANGUAGES)}"
        ) from e
    return _structured_chunks(text, config, separators)
