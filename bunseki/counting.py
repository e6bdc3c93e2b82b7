"""
Character and word counting.

Character counts ignore every whitespace character, including newlines and
the full-width space. English words are whitespace-delimited runs. Japanese
text has no spaces between words, so Japanese words are the morphemes
returned by the tokenizer, minus symbol and blank tokens. Particles and
auxiliary verbs are counted as words.

Example:
    >>> from bunseki.counting import count_chars, count_words
    >>> count_chars("吾輩は 猫である。\\n")
    8
    >>> count_words("Hello world", "en")
    2
"""

import enum
import re
from typing import List, Optional, Sequence, Union

from .exceptions import MalformedInput, TokenizerUnavailable
from .japanese.classify import is_punctuation_or_whitespace
from .japanese.tokenizers import Token, TokenizerHandle


_WHITESPACE = re.compile(r"\s")


class Language(str, enum.Enum):
    """Languages supported by word counting."""

    ENGLISH = "en"
    JAPANESE = "ja"

    @classmethod
    def parse(cls, value: Union[str, "Language"]) -> "Language":
        """
        Accept 'en', 'english', 'ja', 'japanese' (any case) or a Language.

        Raises:
            MalformedInput: For any other value.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        aliases = {
            "en": cls.ENGLISH,
            "english": cls.ENGLISH,
            "ja": cls.JAPANESE,
            "japanese": cls.JAPANESE,
        }
        if normalized not in aliases:
            raise MalformedInput(
                f"Unsupported language '{value}'. Use 'en' (English) or 'ja' (Japanese)."
            )
        return aliases[normalized]


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from text."""
    return _WHITESPACE.sub("", text)


def count_chars(text: str) -> int:
    """
    Count characters excluding spaces, tabs and newlines.

    Args:
        text: Text to measure.

    Returns:
        int: Number of non-whitespace characters.
    """
    return len(strip_whitespace(text))


def meaningful_tokens(tokens: Sequence[Token]) -> List[Token]:
    """Return the tokens that count as words (everything but symbols and blanks)."""
    return [token for token in tokens if not is_punctuation_or_whitespace(token)]


def count_english_words(text: str) -> int:
    # split() with no argument drops leading/trailing whitespace and
    # returns [] for blank text, so blank input counts as zero words
    return len(text.split())


def count_words(
    text: str,
    language: Union[str, Language] = Language.ENGLISH,
    tokenizer: Optional[TokenizerHandle] = None,
) -> int:
    """
    Count the words of text.

    Args:
        text: Text to measure.
        language: 'en' splits on whitespace, 'ja' uses morphological analysis.
        tokenizer: Ready tokenizer handle, required for Japanese.

    Returns:
        int: Number of words. Empty or blank text gives 0.

    Raises:
        MalformedInput: If the language is not supported.
        TokenizerUnavailable: If Japanese is requested without a tokenizer.

    Example:
        >>> count_words("", "en")
        0
        >>> count_words("猫が鳴く。", "ja", tokenizer=handle)
        3
    """
    language = Language.parse(language)
    if language is Language.ENGLISH:
        return count_english_words(text)

    if tokenizer is None:
        raise TokenizerUnavailable("Japanese word counting requires a tokenizer")
    return len(meaningful_tokens(tokenizer.tokenize(text)))


__all__ = [
    "Language",
    "count_chars",
    "count_words",
    "count_english_words",
    "meaningful_tokens",
    "strip_whitespace",
]
