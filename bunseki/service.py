"""
Operation boundary for counting and analysis requests.

TextAnalysisService is what the transports (the MCP server and the web API)
call. Each operation accepts either literal text or a file path, runs the
measurement, and always returns a ToolResponse: errors are converted into
an error-flagged response instead of propagating, so a failing request
never takes the process down.

Example:
    >>> import asyncio
    >>> from bunseki import TextAnalysisService
    >>> service = TextAnalysisService()
    >>> response = asyncio.run(service.count_words(text="Hello world"))
    >>> response.text
    'テキストの単語数: 2単語 (英語モード)'
"""

import functools
import logging
from typing import Iterable, Optional, Tuple

from .config import Settings
from .counting import Language, count_chars, count_english_words, meaningful_tokens
from .exceptions import (
    BunsekiError,
    InitializationError,
    InputReadError,
    MalformedInput,
    TokenizerUnavailable,
)
from .files import read_text_file
from .japanese.classify import HONORIFIC_MARKERS
from .japanese.tokenizers import TokenizerHandle, TokenizerProvider, load_sudachi_tokenizer
from .metrics import analyze
from .results import DEFAULT_SOURCE_NAME, CharCountResult, ToolResponse, WordCountResult

logger = logging.getLogger(__name__)

TOKENIZER_UNAVAILABLE_MESSAGE = (
    "形態素解析器の初期化に失敗しました。しばらく待ってから再試行してください。"
)


class TextAnalysisService:
    """
    Counting and analysis operations sharing one tokenizer.

    Attributes:
        settings: Settings used to build the default tokenizer provider.
        provider: TokenizerProvider shared by all Japanese operations.
    """

    def __init__(
        self,
        provider: Optional[TokenizerProvider] = None,
        settings: Optional[Settings] = None,
        honorific_markers: Iterable[str] = HONORIFIC_MARKERS,
    ):
        """
        Initialize the service.

        Args:
            provider: Tokenizer provider. When None, one is built that loads
                      SudachiPy with the dictionary and split mode from
                      settings.
            settings: Runtime settings. Defaults to Settings.from_env().
            honorific_markers: Markers used for the honorific frequency.
        """
        self.settings = settings or Settings.from_env()
        if provider is None:
            loader = functools.partial(
                load_sudachi_tokenizer,
                dict_name=self.settings.sudachi_dict,
                split_mode=self.settings.split_mode,
            )
            provider = TokenizerProvider(loader=loader, timeout=self.settings.init_timeout)
        self.provider = provider
        self.honorific_markers = tuple(honorific_markers)

    async def warmup(self) -> bool:
        """
        Build the tokenizer ahead of the first request.

        Returns:
            bool: True if the tokenizer is ready. A failure is logged and
            left for the next request to retry.
        """
        try:
            await self.provider.acquire()
        except InitializationError as e:
            logger.warning("Tokenizer warm-up failed, continuing without it: %s", e)
            return False
        return True

    async def count_chars(
        self,
        text: Optional[str] = None,
        path: Optional[str] = None,
    ) -> ToolResponse:
        """Count characters excluding spaces and newlines."""
        try:
            content, source_name = self._load_source(text, path)
            result = CharCountResult(count=count_chars(content), source_name=source_name)
        except Exception as e:
            return self._failure(e)
        return ToolResponse.success(result.summary(), data=result.to_dict())

    async def count_words(
        self,
        text: Optional[str] = None,
        path: Optional[str] = None,
        language: str = "en",
    ) -> ToolResponse:
        """Count words, by whitespace for English and by morphemes for Japanese."""
        try:
            lang = Language.parse(language)
            content, source_name = self._load_source(text, path)
            if lang is Language.ENGLISH:
                result = WordCountResult(
                    count=count_english_words(content),
                    language=lang.value,
                    source_name=source_name,
                )
            else:
                tokenizer = await self._tokenizer()
                tokens = tokenizer.tokenize(content)
                counted = meaningful_tokens(tokens)
                result = WordCountResult(
                    count=len(counted),
                    language=lang.value,
                    source_name=source_name,
                    tokens=tokens,
                    counted=counted,
                )
        except Exception as e:
            return self._failure(e)
        return ToolResponse.success(result.summary(), data=result.to_dict())

    async def analyze(
        self,
        text: Optional[str] = None,
        path: Optional[str] = None,
    ) -> ToolResponse:
        """Produce the full linguistic feature report."""
        try:
            content, _ = self._load_source(text, path)
            tokenizer = await self._tokenizer()
            result = analyze(content, tokenizer, honorific_markers=self.honorific_markers)
        except Exception as e:
            return self._failure(e, prefix="分析中にエラーが発生しました")
        return ToolResponse.success(result.summary(), data=result.to_dict())

    async def _tokenizer(self) -> TokenizerHandle:
        try:
            return await self.provider.acquire()
        except InitializationError as e:
            raise TokenizerUnavailable(TOKENIZER_UNAVAILABLE_MESSAGE) from e

    def _load_source(self, text: Optional[str], path: Optional[str]) -> Tuple[str, str]:
        if (text is None) == (path is None):
            raise MalformedInput("Specify exactly one of text or path.")
        if text is not None:
            return text, DEFAULT_SOURCE_NAME
        resolved, content = read_text_file(path)
        return content, f"ファイル '{resolved}'"

    def _failure(self, error: Exception, prefix: str = "エラーが発生しました") -> ToolResponse:
        if isinstance(error, TokenizerUnavailable):
            logger.warning("Tokenizer unavailable: %s", error.__cause__ or error)
            return ToolResponse.failure(str(error), error)
        if isinstance(error, InputReadError):
            return ToolResponse.failure(f"ファイル読み込みエラー: {error}", error)
        if isinstance(error, MalformedInput):
            return ToolResponse.failure(f"入力エラー: {error}", error)
        if isinstance(error, BunsekiError):
            return ToolResponse.failure(f"{prefix}: {error}", error)
        logger.exception("Unexpected error while handling request")
        return ToolResponse.failure(f"{prefix}: {error}", error)


__all__ = ["TextAnalysisService", "TOKENIZER_UNAVAILABLE_MESSAGE"]
