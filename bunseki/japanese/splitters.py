"""
Sentence splitting for Japanese and mixed-script text.

Sentences end at full-width or half-width terminal punctuation. The
terminators are dropped, each piece is stripped, and empty pieces are
discarded.

Example:
    >>> from bunseki.japanese.splitters import split_sentences
    >>> split_sentences("吾輩は猫である。名前はまだ無い。")
    ['吾輩は猫である', '名前はまだ無い']
"""

import re
from typing import List


SENTENCE_TERMINATORS = "。.！!？?"

_TERMINATOR_PATTERN = re.compile(f"[{re.escape(SENTENCE_TERMINATORS)}]")


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences.

    Args:
        text: Text to split.

    Returns:
        List[str]: Stripped, non-empty sentences in input order. Text without
        terminators is returned as a single sentence; blank text gives [].

    Example:
        >>> split_sentences("はい！ 本当？")
        ['はい', '本当']
        >>> split_sentences("   ")
        []
    """
    pieces = (piece.strip() for piece in _TERMINATOR_PATTERN.split(text))
    return [piece for piece in pieces if piece]


__all__ = ["SENTENCE_TERMINATORS", "split_sentences"]
