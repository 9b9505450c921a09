"""
Separator priority tables for structure-aware splitting.

Every entry is a regular expression with no capturing groups. Lists run from the
coarsest structural boundary down to "" (single characters), so recursive
splitting always terminates with chunks that fit.
"""

import re

from docsplit.config.splitting.models import DEFAULT_CODE_LANGUAGE, SplitterType

DEFAULT_SEPARATOR = "\n\n"
DEFAULT_RECURSIVE_SEPARATORS: list[str] = ["\n\n", "\n", " ", ""]

_TAIL = ["\n\n", "\n", " ", ""]


def _literal(*separators: str) -> list[str]:
    return [re.escape(s) for s in separators]


MARKDOWN_SEPARATORS: list[str] = [
    # Headings, level 1 to 6
    r"\n#{1,6} ",
    # Fenced code blocks
    r"```\n",
    # Horizontal rules
    r"\n\*\*\*+\n",
    r"\n---+\n",
    r"\n___+\n",
    *_literal(*_TAIL),
]

LATEX_SEPARATORS: list[str] = [
    *_literal(
        "\n\\chapter{",
        "\n\\section{",
        "\n\\subsection{",
        "\n\\subsubsection{",
        "\n\\begin{enumerate}",
        "\n\\begin{itemize}",
        "\n\\begin{description}",
        "\n\\begin{list}",
        "\n\\begin{quote}",
        "\n\\begin{quotation}",
        "\n\\begin{verse}",
        "\n\\begin{verbatim}",
        "\n\\begin{align}",
        "$$",
        "$",
    ),
    *_literal(*_TAIL),
]

_CODE_KEYWORDS: dict[str, list[str]] = {
    "python": ["\nclass ", "\ndef ", "\n\tdef ", "\n    def "],
    "js": [
        "\nfunction ", "\nconst ", "\nlet ", "\nvar ", "\nclass ",
        "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ", "\ndefault ",
    ],
    "ts": [
        "\nenum ", "\ninterface ", "\nnamespace ", "\ntype ", "\nclass ", "\nfunction ",
        "\nconst ", "\nlet ", "\nvar ", "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ", "\ndefault ",
    ],
    "java": [
        "\nclass ", "\npublic ", "\nprotected ", "\nprivate ", "\nstatic ",
        "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ",
    ],
    "cpp": [
        "\nclass ", "\nvoid ", "\nint ", "\nfloat ", "\ndouble ",
        "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ",
    ],
    "go": ["\nfunc ", "\nvar ", "\nconst ", "\ntype ", "\nif ", "\nfor ", "\nswitch ", "\ncase "],
    "rust": ["\nfn ", "\nconst ", "\nlet ", "\nif ", "\nwhile ", "\nfor ", "\nloop ", "\nmatch "],
    "php": ["\nfunction ", "\nclass ", "\nif ", "\nforeach ", "\nwhile ", "\ndo ", "\nswitch ", "\ncase "],
    "ruby": ["\ndef ", "\nclass ", "\nif ", "\nunless ", "\nwhile ", "\nfor ", "\ndo ", "\nbegin ", "\nrescue "],
    "swift": [
        "\nfunc ", "\nclass ", "\nstruct ", "\nenum ",
        "\nif ", "\nfor ", "\nwhile ", "\ndo ", "\nswitch ", "\ncase ",
    ],
    "kotlin": [
        "\nclass ", "\npublic ", "\nprotected ", "\nprivate ", "\ninternal ", "\ncompanion ",
        "\nfun ", "\nval ", "\nvar ", "\nif ", "\nfor ", "\nwhile ", "\nwhen ", "\ncase ", "\nelse ",
    ],
    "csharp": [
        "\ninterface ", "\nenum ", "\nimplements ", "\ndelegate ", "\nevent ",
        "\nclass ", "\nabstract ", "\npublic ", "\nprotected ", "\nprivate ", "\nstatic ", "\nreturn ",
        "\nif ", "\ncontinue ", "\nfor ", "\nforeach ", "\nwhile ", "\nswitch ", "\nbreak ", "\ncase ",
        "\nelse ", "\ntry ", "\nthrow ", "\nfinally ", "\ncatch ",
    ],
}

HTML_SEPARATORS: list[str] = _literal(
    "<body", "<div", "<p", "<br", "<li",
    "<h1", "<h2", "<h3", "<h4", "<h5", "<h6",
    "<span", "<table", "<tr", "<td", "<th", "<ul", "<ol",
    "<header", "<footer", "<nav", "<head", "<style", "<script", "<meta", "<title",
    "",
)

CODE_SEPARATORS: dict[str, list[str]] = {
    **{lang: [*_literal(*keywords), *_literal(*_TAIL)] for lang, keywords in _CODE_KEYWORDS.items()},
    "html": HTML_SEPARATORS,
    "markdown": MARKDOWN_SEPARATORS,
    "latex": LATEX_SEPARATORS,
}

LANGUAGE_ALIASES: dict[str, str] = {
    "javascript": "js",
    "typescript": "ts",
    "c++": "cpp",
    "c#": "csharp",
    "cs": "csharp",
    "golang": "go",
    "py": "python",
    "md": "markdown",
    "tex": "latex",
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(CODE_SEPARATORS)


def normalize_language(language: str) -> str:
    key = language.strip().lower()
    return LANGUAGE_ALIASES.get(key, key)


def is_supported_language(language: str) -> bool:
    return normalize_language(language) in CODE_SEPARATORS


def separators_for(splitter_type: SplitterType, language: str | None = None) -> list[str]:
    """Regex separator list for a structure-aware splitter type. Raises KeyError for an unknown language."""
    if splitter_type is SplitterType.MARKDOWN:
        return MARKDOWN_SEPARATORS
    if splitter_type is SplitterType.LATEX:
        return LATEX_SEPARATORS
    if splitter_type is SplitterType.CODE:
        return CODE_SEPARATORS[normalize_language(language or DEFAULT_CODE_LANGUAGE)]
    raise KeyError(splitter_type)
