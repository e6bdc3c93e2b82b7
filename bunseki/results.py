"""
Result classes for text measurement and analysis.

This module provides structured result classes for the counting and
analysis operations, designed for easy integration with FastAPI and MCP.
Every result can render itself as the formatted Japanese text block
returned to clients (``summary()``) and as a JSON-serializable dictionary
(``to_dict()``) that the web API returns next to the text.

Classes:
    MetricEntry: One named metric of the analysis report.
    AnalysisResult: Basic counts plus the full metric report.
    CharCountResult: Character count of a text or file.
    WordCountResult: Word count of a text or file.
    ToolResponse: Success or error payload returned by the service.

Example:
    >>> from bunseki import TokenizerProvider, analyze
    >>> result = analyze("吾輩は猫である。", TokenizerProvider().acquire_sync())
    >>> print(result.summary())
    >>> result.to_dict()["total_sentences"]
    1
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .japanese.tokenizers import Token


DEFAULT_SOURCE_NAME = "テキスト"


@dataclass(frozen=True)
class MetricEntry:
    """
    One metric of the analysis report.

    Attributes:
        key: Stable identifier (e.g. 'average_sentence_length').
        name: Japanese display name.
        value: Formatted value, always a string.
        unit: Display unit.
        description: What the metric indicates.
    """

    key: str
    name: str
    value: str
    unit: str
    description: str

    def to_dict(self) -> Dict:
        return {
            "key": self.key,
            "name": self.name,
            "value": self.value,
            "unit": self.unit,
            "description": self.description,
        }


@dataclass
class AnalysisResult:
    """
    Result from a full linguistic analysis.

    Attributes:
        total_chars: Characters excluding whitespace.
        total_sentences: Number of sentences.
        total_morphemes: Number of tokens.
        metrics: Report entries in display order.

    Example:
        >>> result = analyze(text, tokenizer)
        >>> result.get("average_sentence_length").value
        '7.00'
    """

    total_chars: int
    total_sentences: int
    total_morphemes: int
    metrics: List[MetricEntry] = field(default_factory=list)

    def get(self, key: str) -> Optional[MetricEntry]:
        """
        Look up a metric by key.

        Returns:
            MetricEntry, or None if no metric has that key.
        """
        for entry in self.metrics:
            if entry.key == key:
                return entry
        return None

    def summary(self) -> str:
        """
        Render the report as a Markdown text block in Japanese.

        Returns:
            str: Basic counts followed by one section per metric.
        """
        lines = [
            "# テキスト分析結果",
            "",
            "## 基本情報",
            f"- 総文字数: {self.total_chars}文字",
            f"- 文の数: {self.total_sentences}",
            f"- 総形態素数: {self.total_morphemes}",
            "",
            "## 詳細分析",
        ]
        sections = [
            f"### {entry.name} ({entry.unit})\n"
            f"- 値: {entry.value}\n"
            f"- 説明: {entry.description}"
            for entry in self.metrics
        ]
        lines.append("\n\n".join(sections))
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict:
        """
        Convert to a JSON-serializable dictionary.

        Returns:
            Dict: Basic counts and a mapping of metric key to entry.
        """
        return {
            "total_chars": self.total_chars,
            "total_sentences": self.total_sentences,
            "total_morphemes": self.total_morphemes,
            "metrics": {entry.key: entry.to_dict() for entry in self.metrics},
        }


@dataclass
class CharCountResult:
    """
    Character count excluding spaces and newlines.

    Attributes:
        count: Number of non-whitespace characters.
        source_name: Label of the counted source (text or file name).
    """

    count: int
    source_name: str = DEFAULT_SOURCE_NAME

    def summary(self) -> str:
        return f"{self.source_name}の文字数: {self.count}文字（改行・スペース除外）"

    def to_dict(self) -> Dict:
        return {"source_name": self.source_name, "count": self.count}


@dataclass
class WordCountResult:
    """
    Word count of a text.

    Attributes:
        count: Number of words.
        language: 'en' or 'ja'.
        source_name: Label of the counted source.
        tokens: All tokens (Japanese only).
        counted: Tokens that were counted as words (Japanese only).
    """

    count: int
    language: str
    source_name: str = DEFAULT_SOURCE_NAME
    tokens: List[Token] = field(default_factory=list)
    counted: List[Token] = field(default_factory=list)

    def summary(self) -> str:
        """
        Render the count, and for Japanese the per-token breakdown.

        Returns:
            str: Formatted Japanese text block.
        """
        if self.language != "ja":
            return f"{self.source_name}の単語数: {self.count}単語 (英語モード)"

        details = "\n".join(
            f"【{t.surface_form}】 品詞: {t.part_of_speech}, "
            f"品詞細分類: {t.part_of_speech_detail}, 読み: {t.reading}"
            for t in self.tokens
        )
        counted = ", ".join(t.surface_form for t in self.counted)
        return (
            f"{self.source_name}の単語数: {self.count}単語 (日本語モード、すべての品詞を含む)\n\n"
            f"分析結果:\n{details}\n\n"
            f"有効な単語としてカウントしたもの:\n{counted}"
        )

    def to_dict(self) -> Dict:
        return {
            "source_name": self.source_name,
            "count": self.count,
            "language": self.language,
            "counted": [t.surface_form for t in self.counted],
        }


@dataclass
class ToolResponse:
    """
    Payload returned by every service operation.

    Attributes:
        text: Formatted result, or a human-readable error message.
        is_error: True when the operation failed.
        error_kind: Exception class name of the failure, None on success.
        data: The result's to_dict() on success, None on failure.
    """

    text: str
    is_error: bool = False
    error_kind: Optional[str] = None
    data: Optional[Dict] = None

    @classmethod
    def success(cls, text: str, data: Optional[Dict] = None) -> "ToolResponse":
        return cls(text=text, data=data)

    @classmethod
    def failure(cls, message: str, error: BaseException) -> "ToolResponse":
        return cls(text=message, is_error=True, error_kind=type(error).__name__)

    def to_dict(self) -> Dict:
        return {
            "text": self.text,
            "is_error": self.is_error,
            "error_kind": self.error_kind,
            "data": self.data,
        }
