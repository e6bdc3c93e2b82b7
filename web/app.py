"""FastAPI web application for Bunseki text analysis."""

from contextlib import asynccontextmanager
from typing import Literal

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from bunseki import ToolResponse

from .state import app_state


# error_kind -> HTTP status; anything else is a server error
ERROR_STATUS = {
    "MalformedInput": 400,
    "TokenizerUnavailable": 503,
    "InitializationError": 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the tokenizer before accepting requests."""
    service = app_state.service
    if service.settings.warmup:
        await service.warmup()
    yield


app = FastAPI(
    title="Bunseki Text Analyzer",
    description="Character/word counting and Japanese linguistic analysis",
    version="0.1.0",
    lifespan=lifespan,
)


class TextRequest(BaseModel):
    """Literal text to measure. File paths are only accepted over MCP stdio."""

    model_config = ConfigDict(extra="forbid")

    text: str


class WordCountRequest(TextRequest):
    language: Literal["en", "ja", "english", "japanese"] = "en"


def _respond(response: ToolResponse) -> JSONResponse:
    status_code = 200
    if response.is_error:
        status_code = ERROR_STATUS.get(response.error_kind, 500)
    return JSONResponse(response.to_dict(), status_code=status_code)


@app.get("/health")
async def health():
    """Report whether the tokenizer is ready."""
    provider = app_state.service.provider
    return {
        "status": "ok",
        "tokenizer": provider.state.value,
        "load_attempts": provider.load_attempts,
    }


@app.post("/api/count_chars")
async def count_chars(request: TextRequest):
    """Count characters excluding spaces and newlines."""
    return _respond(
        await app_state.service.count_chars(text=request.text)
    )


@app.post("/api/count_words")
async def count_words(request: WordCountRequest):
    """Count English or Japanese words."""
    return _respond(
        await app_state.service.count_words(
            text=request.text, language=request.language
        )
    )


@app.post("/api/analyze")
async def analyze(request: TextRequest):
    """Run the full linguistic feature analysis."""
    return _respond(await app_state.service.analyze(text=request.text))
