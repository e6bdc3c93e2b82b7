"""
Bunseki: text measurement and Japanese linguistic analysis.

Bunseki counts characters and words in English and Japanese text and
produces a linguistic feature report for Japanese text, built on
morphological analysis with SudachiPy.

Key Features:
    - Character counts that ignore spaces and newlines
    - Word counts by whitespace (English) or morphemes (Japanese)
    - Sentence length, part-of-speech and particle distributions
    - Script (hiragana/katakana/kanji/...) ratios and lexical diversity
    - Honorific and punctuation frequency
    - One shared tokenizer, built once even under concurrent requests
    - MCP server and FastAPI transports

Quick Start (Service):
    >>> import asyncio
    >>> from bunseki import TextAnalysisService
    >>>
    >>> service = TextAnalysisService()
    >>> response = asyncio.run(service.analyze(text="吾輩は猫である。名前はまだ無い。"))
    >>> print(response.text)

Quick Start (Library):
    >>> from bunseki import TokenizerProvider, analyze, count_chars
    >>>
    >>> tokenizer = TokenizerProvider().acquire_sync()
    >>> result = analyze("吾輩は猫である。", tokenizer)
    >>> print(result.get("pos_ratio").value)

Installation Requirements:
    For Japanese text processing, install SudachiPy:
        pip install sudachipy sudachidict_core
"""

__version__ = "0.1.0"

# Operation boundary
from .service import TextAnalysisService

# Configuration
from .config import Settings

# Counting and analysis
from .counting import Language, count_chars, count_words
from .metrics import analyze, build_report

# Result classes
from .results import (
    AnalysisResult,
    CharCountResult,
    MetricEntry,
    ToolResponse,
    WordCountResult,
)

# Exceptions
from .exceptions import (
    BunsekiError,
    InitializationError,
    InputReadError,
    MalformedInput,
    TokenizerUnavailable,
)

# Japanese building blocks
from .japanese import (
    HONORIFIC_MARKERS,
    ScriptCategory,
    Token,
    TokenizerProvider,
    TokenizerState,
    count_scripts,
    split_sentences,
)

__all__ = [
    "__version__",
    # Service
    "TextAnalysisService",
    "Settings",
    # Counting and analysis
    "Language",
    "count_chars",
    "count_words",
    "analyze",
    "build_report",
    # Results
    "AnalysisResult",
    "CharCountResult",
    "MetricEntry",
    "ToolResponse",
    "WordCountResult",
    # Exceptions
    "BunsekiError",
    "InitializationError",
    "InputReadError",
    "MalformedInput",
    "TokenizerUnavailable",
    # Japanese utilities
    "HONORIFIC_MARKERS",
    "ScriptCategory",
    "Token",
    "TokenizerProvider",
    "TokenizerState",
    "count_scripts",
    "split_sentences",
]
