"""
Character script classification.

Each non-whitespace character is assigned to exactly one ScriptCategory by
looking it up in SCRIPT_RANGES. Categories are tested in table order, so a
character that falls in several ranges takes the first match. Characters
outside every range count as OTHER; whitespace is not counted at all.
"""

import enum
import re
from typing import Dict, Optional, Tuple


class ScriptCategory(str, enum.Enum):
    """Writing-system categories reported in the script ratio."""

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    KANJI = "kanji"
    ALPHABET = "alphabet"
    DIGIT = "digit"
    OTHER = "other"


# Inclusive code point ranges, tested in this order
SCRIPT_RANGES: Dict[ScriptCategory, Tuple[Tuple[int, int], ...]] = {
    ScriptCategory.HIRAGANA: ((0x3040, 0x309F),),
    ScriptCategory.KATAKANA: ((0x30A0, 0x30FF),),
    ScriptCategory.KANJI: (
        (0x4E00, 0x9FFF),  # CJK Unified Ideographs
        (0x3400, 0x4DBF),  # Extension A
        (0xF900, 0xFAFF),  # Compatibility Ideographs
    ),
    ScriptCategory.ALPHABET: ((0x41, 0x5A), (0x61, 0x7A)),
    ScriptCategory.DIGIT: ((0x30, 0x39), (0xFF10, 0xFF19)),
}

_WHITESPACE = re.compile(r"\s")


def classify_char(char: str) -> Optional[ScriptCategory]:
    """
    Classify a single character.

    Args:
        char: A one-character string.

    Returns:
        ScriptCategory for the character, or None if it is whitespace.
    """
    if _WHITESPACE.match(char):
        return None
    code = ord(char)
    for category, ranges in SCRIPT_RANGES.items():
        for low, high in ranges:
            if low <= code <= high:
                return category
    return ScriptCategory.OTHER


def count_scripts(text: str) -> Dict[ScriptCategory, int]:
    """
    Count the non-whitespace characters of text per script category.

    Returns:
        Dict with every ScriptCategory as a key, in declaration order. The
        values sum to the number of non-whitespace characters.
    """
    counts = {category: 0 for category in ScriptCategory}
    for char in text:
        category = classify_char(char)
        if category is not None:
            counts[category] += 1
    return counts


__all__ = ["ScriptCategory", "SCRIPT_RANGES", "classify_char", "count_scripts"]
