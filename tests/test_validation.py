"""Tests for configuration validation."""

from docsplit.config.splitting.models import SplitConfiguration, SplitterType
from docsplit.services.splitting.validation import validate_config


def _config(**kwargs) -> SplitConfiguration:
    kwargs.setdefault("splitter_type", SplitterType.RECURSIVE)
    return SplitConfiguration(**kwargs)


def test_valid_config():
    result = validate_config(_config(chunk_size=1000, chunk_overlap=200))
    assert result.valid
    assert result.errors == []


def test_zero_chunk_size_is_rejected():
    result = validate_config(_config(chunk_size=0, chunk_overlap=0))
    assert not result.valid
    assert any("chunk size" in e.lower() for e in result.errors)


def test_overlap_equal_to_size_is_rejected():
    result = validate_config(_config(chunk_size=100, chunk_overlap=100))
    assert not result.valid
    assert "Chunk overlap must be less than chunk size" in result.errors


def test_all_failures_are_reported():
    result = validate_config(_config(chunk_size=0, chunk_overlap=-1))
    assert result.errors == [
        "Chunk size must be greater than 0",
        "Chunk overlap must be non-negative",
    ]


def test_camel_case_input():
    config = SplitConfiguration.model_validate(
        {"splitterType": "CharacterTextSplitter", "chunkSize": 0, "chunkOverlap": 0}
    )
    assert not validate_config(config).valid


def test_unsupported_code_language():
    result = validate_config(_config(splitter_type=SplitterType.CODE, chunk_size=100, chunk_overlap=0, language="cobol"))
    assert result.errors == ["Unsupported language for CodeSplitter: cobol"]


def test_code_language_aliases_are_accepted():
    for language in ("python", "javascript", "TS", "c#", "markdown"):
        config = _config(splitter_type=SplitterType.CODE, chunk_size=100, chunk_overlap=0, language=language)
        assert validate_config(config).valid, language


def test_unsupported_encoding():
    config = _config(splitter_type=SplitterType.TOKEN, chunk_size=100, chunk_overlap=0, encoding_name="gpt-9")
    assert validate_config(config).errors == ["Unsupported encoding for TokenTextSplitter: gpt-9"]


def test_encoding_defaults_when_unset():
    config = _config(splitter_type=SplitterType.TOKEN, chunk_size=100, chunk_overlap=0)
    assert validate_config(config).valid
