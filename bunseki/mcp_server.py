"""
MCP server exposing bunseki over stdio.

Tools:
    count_chars: Character count of a file.
    count_words: Word count of a file.
    count_clipboard_chars: Character count of literal text.
    count_clipboard_words: Word count of literal text.
    analyze_text: Linguistic feature report of literal text.
    analyze_file: Linguistic feature report of a file.

Usage:
    bunseki-mcp
    python -m bunseki.mcp_server

stdout carries the protocol, so all logging goes to stderr.
"""

import asyncio
import logging
import sys
from functools import lru_cache
from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from .config import Settings
from .results import ToolResponse
from .service import TextAnalysisService

logger = logging.getLogger(__name__)

mcp = FastMCP("JapaneseTextAnalyzer")

# filePath is the argument name MCP clients send
FilePath = Annotated[
    str,
    Field(description="対象ファイルのパス（絶対パス、またはカレントディレクトリからの相対パス）"),
]
Text = Annotated[str, Field(description="対象のテキスト")]
LanguageOption = Annotated[
    Literal["en", "ja"],
    Field(description="言語 (en: 英語, ja: 日本語)"),
]


@lru_cache(maxsize=1)
def get_service() -> TextAnalysisService:
    """Create and cache the service shared by all tools."""
    return TextAnalysisService()


def _unwrap(response: ToolResponse) -> str:
    # ToolError makes the SDK return the message with the error flag set
    if response.is_error:
        raise ToolError(response.text)
    return response.text


@mcp.tool()
async def count_chars(filePath: FilePath) -> str:
    """ファイルの文字数を計測します。スペースや改行を除いた実質的な文字数をカウントします。"""
    return _unwrap(await get_service().count_chars(path=filePath))


@mcp.tool()
async def count_words(filePath: FilePath, language: LanguageOption = "en") -> str:
    """ファイルの単語数を計測します。英語ではスペースで区切られた単語をカウントし、日本語では形態素解析を使用します。"""
    return _unwrap(await get_service().count_words(path=filePath, language=language))


@mcp.tool()
async def count_clipboard_chars(text: Text) -> str:
    """テキストの文字数を計測します。スペースや改行を除いた実質的な文字数をカウントします。"""
    return _unwrap(await get_service().count_chars(text=text))


@mcp.tool()
async def count_clipboard_words(text: Text, language: LanguageOption = "en") -> str:
    """テキストの単語数を計測します。英語ではスペースで区切られた単語をカウントし、日本語では形態素解析を使用します。"""
    return _unwrap(await get_service().count_words(text=text, language=language))


@mcp.tool()
async def analyze_text(text: Text) -> str:
    """テキストの詳細な形態素解析と言語的特徴の分析を行います。文の複雑さ、品詞の割合、語彙の多様性などを解析します。"""
    return _unwrap(await get_service().analyze(text=text))


@mcp.tool()
async def analyze_file(filePath: FilePath) -> str:
    """ファイルの詳細な形態素解析と言語的特徴の分析を行います。文の複雑さ、品詞の割合、語彙の多様性などを解析します。"""
    return _unwrap(await get_service().analyze(path=filePath))


def main() -> None:
    """Warm up the tokenizer and serve MCP requests on stdio."""
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    service = get_service()
    if settings.warmup:
        logger.info("Initializing tokenizer before starting the server")
        asyncio.run(service.warmup())

    logger.info("Serving MCP requests on stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
