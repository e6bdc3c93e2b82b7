"""
Linguistic feature report for Japanese text.

The report combines three independent views of the same text:

1. Sentences from the sentence splitter.
2. Per-character script counts.
3. The token stream from the morphological analyzer.

All ratios are guarded against an empty denominator: averages fall back to
"0.00" and distributions fall back to an empty listing (or 0.00% for every
script category) instead of raising ZeroDivisionError.

Example:
    >>> from bunseki.metrics import analyze
    >>> result = analyze("吾輩は猫である。名前はまだ無い。", tokenizer)
    >>> result.total_sentences
    2
    >>> print(result.summary())
"""

from collections import Counter
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .counting import count_chars
from .japanese.classify import (
    HONORIFIC_MARKERS,
    is_honorific,
    is_katakana_only,
    is_particle,
    is_sentence_final_punctuation,
)
from .japanese.scripts import ScriptCategory, count_scripts
from .japanese.splitters import split_sentences
from .japanese.tokenizers import Token, TokenizerHandle
from .results import AnalysisResult, MetricEntry


TOP_PARTICLES = 10


def _ratio(part: float, whole: float) -> str:
    if not whole:
        return "0.00"
    return f"{part / whole:.2f}"


def _percent(part: float, whole: float) -> str:
    if not whole:
        return "0.00"
    return f"{part / whole * 100:.2f}"


def _distribution(items: Iterable[Tuple[str, int]], whole: int) -> str:
    return ", ".join(f"{label}: {_percent(count, whole)}%" for label, count in items)


def _entry(key: str, name: str, value: str, unit: str, description: str) -> MetricEntry:
    return MetricEntry(key=key, name=name, value=value, unit=unit, description=description)


def build_report(
    text: str,
    tokens: Sequence[Token],
    sentences: Optional[Sequence[str]] = None,
    script_counts: Optional[Mapping[ScriptCategory, int]] = None,
    honorific_markers: Iterable[str] = HONORIFIC_MARKERS,
) -> AnalysisResult:
    """
    Compute the full metric report from already-analyzed text.

    Args:
        text: The raw text.
        tokens: Tokens of the whole text.
        sentences: Sentences of the text. Computed with split_sentences
                   when omitted.
        script_counts: Per-script character counts. Computed with
                       count_scripts when omitted.
        honorific_markers: Markers used for the honorific frequency.

    Returns:
        AnalysisResult: Basic counts and nine metric entries.
    """
    if sentences is None:
        sentences = split_sentences(text)
    if script_counts is None:
        script_counts = count_scripts(text)
    markers = tuple(honorific_markers)

    total_chars = count_chars(text)
    total_sentences = len(sentences)
    total_morphemes = len(tokens)

    pos_counts = Counter()
    particle_counts = Counter()
    base_forms = set()
    katakana_words = 0
    punctuation_count = 0
    honorific_count = 0

    for token in tokens:
        pos_counts[token.part_of_speech] += 1
        if is_particle(token):
            particle_counts[token.surface_form] += 1
        base_forms.add(token.base_form)
        if is_katakana_only(token):
            katakana_words += 1
        if is_sentence_final_punctuation(token):
            punctuation_count += 1
        if is_honorific(token, markers):
            honorific_count += 1

    total_particles = sum(particle_counts.values())
    total_script_chars = sum(script_counts.values())

    metrics: List[MetricEntry] = [
        _entry(
            "average_sentence_length",
            "平均文長",
            _ratio(total_chars, total_sentences),
            "文字／文",
            "一文の長さ。長すぎると読みにくくなる。",
        ),
        _entry(
            "average_morphemes_per_sentence",
            "文あたりの形態素数",
            _ratio(total_morphemes, total_sentences),
            "形態素／文",
            "文の密度や構文の複雑さを表す。",
        ),
        _entry(
            "pos_ratio",
            "品詞の割合",
            _distribution(pos_counts.items(), total_morphemes),
            "%",
            "名詞・動詞・形容詞などの使用バランスを分析。",
        ),
        _entry(
            "particle_ratio",
            "助詞の割合",
            # most_common keeps first-seen order among equal counts
            _distribution(particle_counts.most_common(TOP_PARTICLES), total_particles),
            "%",
            "主語・目的語などの構造分析や文の流れを判断。",
        ),
        _entry(
            "script_type_ratio",
            "文字種の割合",
            _distribution(
                ((category.value, count) for category, count in script_counts.items()),
                total_script_chars,
            ),
            "%",
            "ひらがな・カタカナ・漢字・英数字の構成比率。",
        ),
        _entry(
            "vocabulary_diversity",
            "語彙の多様性（タイプ/トークン比）",
            _percent(len(base_forms), total_morphemes),
            "%",
            "語彙の豊かさや表現力の指標。",
        ),
        _entry(
            "katakana_word_ratio",
            "カタカナ語の割合",
            _percent(katakana_words, total_morphemes),
            "%",
            "外来語や専門用語の多さ、カジュアルさを示す。",
        ),
        _entry(
            "honorific_frequency",
            "敬語の頻度",
            _ratio(honorific_count, total_sentences),
            "回／文",
            "丁寧・フォーマルさを示す。",
        ),
        _entry(
            "punctuation_per_sentence",
            "句読点の平均数",
            _ratio(punctuation_count, total_sentences),
            "個／文",
            "文の区切りや読みやすさに影響。",
        ),
    ]

    return AnalysisResult(
        total_chars=total_chars,
        total_sentences=total_sentences,
        total_morphemes=total_morphemes,
        metrics=metrics,
    )


def analyze(
    text: str,
    tokenizer: TokenizerHandle,
    honorific_markers: Iterable[str] = HONORIFIC_MARKERS,
) -> AnalysisResult:
    """
    Tokenize text and compute its metric report.

    Args:
        text: Text to analyze.
        tokenizer: A ready tokenizer handle.
        honorific_markers: Markers used for the honorific frequency.

    Returns:
        AnalysisResult: The complete report.
    """
    sentences = split_sentences(text)
    script_counts = count_scripts(text)
    tokens = tokenizer.tokenize(text)
    return build_report(
        text,
        tokens,
        sentences=sentences,
        script_counts=script_counts,
        honorific_markers=honorific_markers,
    )


__all__ = ["TOP_PARTICLES", "analyze", "build_report"]
