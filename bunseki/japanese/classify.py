"""
Predicates over single tokens.

Every metric in the analysis report is built from these checks. Tag names
follow the Japanese part-of-speech labels emitted by the analyzer. Symbols
appear as '記号' in IPADIC-style output and as '補助記号' in UniDic and
Sudachi output, so both are treated as symbols.
"""

from typing import Iterable

from .tokenizers import Token


SYMBOL_POS = frozenset({"記号", "補助記号"})
BLANK_POS = frozenset({"空白"})
PARTICLE_POS = "助詞"

# Sub-classifications of sentence-level punctuation: period and comma
SENTENCE_PUNCTUATION_DETAILS = frozenset({"句点", "読点"})

KATAKANA_RANGE = (0x30A0, 0x30FF)

# Polite copulas, respectful/humble auxiliaries and honorific prefixes.
# Matched as substrings of the surface form or the base form.
HONORIFIC_MARKERS = (
    "です",
    "ます",
    "でした",
    "ました",
    "ございます",
    "いただく",
    "なさる",
    "れる",
    "られる",
    "どうぞ",
    "お",
    "ご",
)


def is_punctuation_or_whitespace(token: Token) -> bool:
    """Return True for symbol and blank tokens."""
    return token.part_of_speech in SYMBOL_POS or token.part_of_speech in BLANK_POS


def is_particle(token: Token) -> bool:
    """Return True for grammatical particles (は, が, を, ...)."""
    return token.part_of_speech == PARTICLE_POS


def is_katakana_only(token: Token) -> bool:
    """
    Return True when every character of the surface form is katakana.

    The prolonged sound mark 'ー' and the middle dot '・' fall inside the
    katakana block and count as katakana. An empty surface is never
    katakana-only.
    """
    surface = token.surface_form
    if not surface:
        return False
    low, high = KATAKANA_RANGE
    return all(low <= ord(char) <= high for char in surface)


def is_sentence_final_punctuation(token: Token) -> bool:
    """Return True for symbol tokens classified as a period or a comma."""
    return (
        token.part_of_speech in SYMBOL_POS
        and token.part_of_speech_detail in SENTENCE_PUNCTUATION_DETAILS
    )


def is_honorific(token: Token, markers: Iterable[str] = HONORIFIC_MARKERS) -> bool:
    """
    Return True when the token carries an honorific marker.

    Args:
        token: Token to check.
        markers: Marker strings to look for. Defaults to HONORIFIC_MARKERS.
    """
    return any(
        marker in token.surface_form or marker in token.base_form
        for marker in markers
    )


__all__ = [
    "HONORIFIC_MARKERS",
    "SYMBOL_POS",
    "BLANK_POS",
    "PARTICLE_POS",
    "SENTENCE_PUNCTUATION_DETAILS",
    "is_punctuation_or_whitespace",
    "is_particle",
    "is_katakana_only",
    "is_sentence_final_punctuation",
    "is_honorific",
]
