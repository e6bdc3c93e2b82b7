"""
Japanese language processing utilities for bunseki.

This subpackage provides the building blocks of the Japanese analysis:
morphological analysis through a shared tokenizer, token predicates,
sentence splitting and character script classification.

Japanese text presents unique challenges for NLP because:
1. Words are not separated by spaces (unlike English)
2. Multiple writing systems are used (hiragana, katakana, kanji)
3. Context-dependent meaning requires morphological analysis

Usage:
    >>> from bunseki.japanese import split_sentences, count_scripts
    >>> split_sentences("吾輩は猫である。名前はまだ無い。")
    ['吾輩は猫である', '名前はまだ無い']

Components:
    TokenizerProvider: Builds the analyzer once and shares it
    Token: A single morpheme
    split_sentences: Split text on terminal punctuation
    count_scripts: Count characters per writing system
"""

from .classify import (
    HONORIFIC_MARKERS,
    is_honorific,
    is_katakana_only,
    is_particle,
    is_punctuation_or_whitespace,
    is_sentence_final_punctuation,
)
from .scripts import ScriptCategory, classify_char, count_scripts
from .splitters import split_sentences
from .tokenizers import (
    SudachiTokenizer,
    Token,
    TokenizerHandle,
    TokenizerProvider,
    TokenizerState,
    has_sudachi,
    load_sudachi_tokenizer,
    split_for_analyzer,
)

__all__ = [
    "Token",
    "TokenizerHandle",
    "TokenizerProvider",
    "TokenizerState",
    "SudachiTokenizer",
    "has_sudachi",
    "load_sudachi_tokenizer",
    "split_for_analyzer",
    "HONORIFIC_MARKERS",
    "is_honorific",
    "is_katakana_only",
    "is_particle",
    "is_punctuation_or_whitespace",
    "is_sentence_final_punctuation",
    "ScriptCategory",
    "classify_char",
    "count_scripts",
    "split_sentences",
]
