"""Tests for the size-based and structure-aware splitters."""

import pytest

from docsplit.config.splitting.models import SplitConfiguration, SplitterType
from docsplit.services.splitting.errors import ConfigurationError
from docsplit.services.splitting.strategies import STRATEGY_REGISTRY, get_strategy_fn
from docsplit.services.splitting.strategies.base import merge_splits, split_on_separator
from docsplit.services.splitting.strategies.character import character_chunks
from docsplit.services.splitting.strategies.recursive import parse_separator_list, recursive_chunks, resolve_separators
from docsplit.services.splitting.strategies.structured import code_chunks, latex_chunks, markdown_chunks


def _config(splitter_type=SplitterType.RECURSIVE, chunk_size=1000, chunk_overlap=0, **kwargs) -> SplitConfiguration:
    return SplitConfiguration(splitter_type=splitter_type, chunk_size=chunk_size, chunk_overlap=chunk_overlap, **kwargs)


def test_registry_covers_every_splitter_type():
    assert set(STRATEGY_REGISTRY) == set(SplitterType)


def test_unknown_splitter_type():
    with pytest.raises(ConfigurationError):
        get_strategy_fn("NopeSplitter")


def test_split_on_separator_keeps_separator_at_start():
    assert split_on_separator("a b c", r"\ ", keep_separator=True) == ["a", " b", " c"]
    assert split_on_separator("a  b", r"\ ", keep_separator=False) == ["a", "b"]
    assert split_on_separator("abc", "", keep_separator=True) == ["a", "b", "c"]


def test_merge_splits_carries_overlap():
    chunks = merge_splits(list("abcdefghij"), "", chunk_size=4, chunk_overlap=2)
    assert chunks == ["abcd", "cdef", "efgh", "ghij"]


# Recursive


def test_recursive_small_sentences():
    text = "A. B. C. D."
    chunks = recursive_chunks(text, _config(chunk_size=5))
    assert chunks == ["A. B.", "C.", "D."]
    assert all(len(c) <= 5 for c in chunks)
    assert "".join(c.replace(" ", "") for c in chunks) == text.replace(" ", "")


def test_recursive_overlap_equals_configured_overlap():
    chunks = recursive_chunks("abcdefghij", _config(chunk_size=4, chunk_overlap=2))
    assert chunks == ["abcd", "cdef", "efgh", "ghij"]
    for prev, nxt in zip(chunks, chunks[1:]):
        assert prev[-2:] == nxt[:2]


def test_recursive_prefers_paragraphs():
    text = "First paragraph here.\n\nSecond paragraph here.\n\nThird one."
    chunks = recursive_chunks(text, _config(chunk_size=30))
    assert chunks == ["First paragraph here.", "Second paragraph here.", "Third one."]


def test_recursive_falls_back_to_characters_for_long_words():
    text = "tiny " + "x" * 12
    chunks = recursive_chunks(text, _config(chunk_size=5))
    assert all(len(c) <= 5 for c in chunks)
    assert "".join(chunks) == "tiny" + "x" * 12


def test_recursive_without_empty_separator_emits_oversized_piece_whole():
    text = "tiny " + "x" * 12
    chunks = recursive_chunks(text, _config(chunk_size=5, separators=[" "]))
    assert chunks == ["tiny", "x" * 12]


def test_comma_delimited_separator_is_unescaped():
    assert parse_separator_list(r"\n\n,\n, ,") == ["\n\n", "\n", " ", ""]
    assert parse_separator_list(r"\t,;") == ["\t", ";"]


def test_separator_string_wins_over_separator_list():
    config = _config(separator=r"\n", separators=[" "])
    assert resolve_separators(config) == ["\n"]
    assert resolve_separators(_config(separators=["|"])) == ["|"]
    assert resolve_separators(_config()) == ["\n\n", "\n", " ", ""]


def test_recursive_with_custom_separator_string():
    text = "one;two;three"
    chunks = recursive_chunks(text, _config(chunk_size=8, separator=";"))
    assert chunks == ["one;two", ";three"]


# Fixed separator


def test_character_merges_with_separator():
    text = "para one\n\npara two\n\npara three"
    chunks = character_chunks(text, _config(SplitterType.FIXED_SEPARATOR, chunk_size=20))
    assert chunks == ["para one\n\npara two", "para three"]


def test_character_custom_separator():
    chunks = character_chunks("a|b|c", _config(SplitterType.FIXED_SEPARATOR, chunk_size=1, separator="|"))
    assert chunks == ["a", "b", "c"]


def test_character_overlap_reuses_trailing_pieces():
    chunks = character_chunks("a b c d e", _config(SplitterType.FIXED_SEPARATOR, chunk_size=5, chunk_overlap=2, separator=" "))
    assert chunks == ["a b c", "c d e"]


def test_character_emits_oversized_piece_whole():
    text = "short\n\n" + "x" * 30
    chunks = character_chunks(text, _config(SplitterType.FIXED_SEPARATOR, chunk_size=10))
    assert chunks == ["short", "x" * 30]


# Structure-aware


def test_markdown_splits_on_headings():
    text = (
        "# Title\n\nIntro paragraph here.\n"
        "\n## Section A\n\nAlpha text.\n"
        "\n## Section B\n\nBeta text."
    )
    chunks = markdown_chunks(text, _config(SplitterType.MARKDOWN, chunk_size=40))
    assert len(chunks) == 3
    assert chunks[0].startswith("# Title")
    assert chunks[1].startswith("## Section A")
    assert chunks[2].startswith("## Section B")


def test_latex_splits_on_sections():
    text = "\\section{Intro}\nText one.\n\\section{Next}\nText two."
    chunks = latex_chunks(text, _config(SplitterType.LATEX, chunk_size=30))
    assert chunks == ["\\section{Intro}\nText one.", "\\section{Next}\nText two."]


def test_python_code_splits_on_definitions():
    text = (
        "import os\n\n"
        "class Foo:\n    def a(self):\n        return 1\n\n"
        "def bar():\n    return 2\n"
    )
    chunks = code_chunks(text, _config(SplitterType.CODE, chunk_size=40, language="python"))
    assert chunks[0] == "import os"
    assert any(c.startswith("def bar():") for c in chunks)
    assert all(len(c) <= 40 for c in chunks)


def test_code_defaults_to_python():
    text = "x = 1\n\ndef f():\n    return x\n"
    chunks = code_chunks(text, _config(SplitterType.CODE, chunk_size=12))
    assert chunks[0] == "x = 1"


def test_code_rejects_unsupported_language():
    with pytest.raises(ConfigurationError, match="cobol"):
        code_chunks("MOVE A TO B.", _config(SplitterType.CODE, chunk_size=100, language="cobol"))


@pytest.mark.parametrize(
    "splitter_type",
    [SplitterType.RECURSIVE, SplitterType.FIXED_SEPARATOR, SplitterType.MARKDOWN, SplitterType.LATEX, SplitterType.CODE],
)
def test_size_invariant_on_prose(splitter_type):
    text = " ".join(f"word{i}" for i in range(200))
    config = _config(splitter_type, chunk_size=50, chunk_overlap=10, separator=" " if splitter_type is SplitterType.FIXED_SEPARATOR else None)
    fn = {
        SplitterType.RECURSIVE: recursive_chunks,
        SplitterType.FIXED_SEPARATOR: character_chunks,
        SplitterType.MARKDOWN: markdown_chunks,
        SplitterType.LATEX: latex_chunks,
        SplitterType.CODE: code_chunks,
    }[splitter_type]
    chunks = fn(text, config)
    assert len(chunks) > 1
    assert all(len(c) <= 50 for c in chunks)
