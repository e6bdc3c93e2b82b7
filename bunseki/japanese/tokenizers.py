"""
Japanese tokenizer integration and lifecycle management.

This module owns the morphological analyzer used by every Japanese
operation. Building the analyzer means loading a large dictionary, which is
slow, so the analyzer is built at most once per TokenizerProvider and then
shared by all callers.

The default backend is SudachiPy. SudachiPy is preferred over MeCab because:
- It includes a built-in dictionary (sudachidict_core)
- No external configuration is required
- It has efficient memory usage and high-speed processing

Any object with a ``tokenize(text) -> list[Token]`` method can be used in
place of SudachiPy by passing a custom loader to TokenizerProvider.

Installation:
    pip install sudachipy sudachidict_core

Example:
    >>> import asyncio
    >>> from bunseki.japanese.tokenizers import TokenizerProvider
    >>> provider = TokenizerProvider()
    >>> tokenizer = asyncio.run(provider.acquire())
    >>> [t.surface_form for t in tokenizer.tokenize("猫が鳴く")]
    ['猫', 'が', '鳴く']
"""

import asyncio
import concurrent.futures
import enum
import importlib.util
import inspect
import logging
import re
import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Protocol

from ..exceptions import InitializationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """
    A single morpheme produced by the analyzer.

    Attributes:
        surface_form: The text as it appears in the input.
        part_of_speech: Top-level part-of-speech tag (e.g. '名詞', '助詞').
        part_of_speech_detail: First sub-classification (e.g. '句点').
        reading: Katakana reading.
        base_form: Dictionary (lemma) form.
    """

    surface_form: str
    part_of_speech: str
    part_of_speech_detail: str = ""
    reading: str = ""
    base_form: str = ""


class TokenizerHandle(Protocol):
    """Anything that turns text into a list of Tokens."""

    def tokenize(self, text: str) -> List[Token]:
        ...


# SudachiPy rejects inputs longer than this many UTF-8 bytes
MAX_INPUT_BYTES = 49149

# Preferred chunk boundaries: line breaks and sentence terminators
_BREAK_PATTERN = re.compile(r"[^\n。.！!？?]*[\n。.！!？?]+|[^\n。.！!？?]+")


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _hard_cut(text: str, max_bytes: int) -> Iterator[str]:
    start = 0
    size = 0
    for index, char in enumerate(text):
        char_size = _byte_len(char)
        if size + char_size > max_bytes and index > start:
            yield text[start:index]
            start, size = index, 0
        size += char_size
    if start < len(text):
        yield text[start:]


def split_for_analyzer(text: str, max_bytes: int = MAX_INPUT_BYTES) -> List[str]:
    """
    Split text into chunks the analyzer accepts.

    Chunks end at line breaks or sentence terminators where possible. A
    single sentence longer than ``max_bytes`` is cut at character
    boundaries. Joining the chunks gives back the original text.

    Args:
        text: Text to split.
        max_bytes: Largest UTF-8 size of one chunk.

    Returns:
        List[str]: Non-empty chunks in input order; [] for empty text.

    Example:
        >>> split_for_analyzer("あい。うえ。", max_bytes=9)
        ['あい。', 'うえ。']
    """
    if _byte_len(text) <= max_bytes:
        return [text] if text else []

    chunks = []
    current = []
    current_size = 0
    for match in _BREAK_PATTERN.finditer(text):
        for piece in _hard_cut(match.group(), max_bytes):
            piece_size = _byte_len(piece)
            if current and current_size + piece_size > max_bytes:
                chunks.append("".join(current))
                current, current_size = [], 0
            current.append(piece)
            current_size += piece_size
    if current:
        chunks.append("".join(current))
    return chunks


class SudachiTokenizer:
    """
    Adapts a SudachiPy tokenizer to the TokenizerHandle protocol.

    Long texts are fed to SudachiPy in chunks of at most ``max_bytes`` UTF-8
    bytes and the resulting token lists are concatenated.

    Args:
        tokenizer: A tokenizer created with ``Dictionary().create()``.
        mode: A ``SplitMode`` value.
        max_bytes: Largest chunk passed to SudachiPy in one call.
    """

    def __init__(self, tokenizer: Any, mode: Any, max_bytes: int = MAX_INPUT_BYTES):
        self._tokenizer = tokenizer
        self._mode = mode
        self._max_bytes = max_bytes

    def tokenize(self, text: str) -> List[Token]:
        tokens: List[Token] = []
        for chunk in split_for_analyzer(text, self._max_bytes):
            tokens.extend(self._tokenize_chunk(chunk))
        return tokens

    def _tokenize_chunk(self, text: str) -> List[Token]:
        tokens = []
        for morpheme in self._tokenizer.tokenize(text, self._mode):
            pos = morpheme.part_of_speech()
            tokens.append(
                Token(
                    surface_form=morpheme.surface(),
                    part_of_speech=pos[0],
                    part_of_speech_detail=pos[1] if len(pos) > 1 else "",
                    reading=morpheme.reading_form(),
                    base_form=morpheme.dictionary_form(),
                )
            )
        return tokens


def has_sudachi() -> bool:
    """
    Check if SudachiPy is installed.

    Returns:
        bool: True if the sudachipy package can be imported.
    """
    return importlib.util.find_spec("sudachipy") is not None


def load_sudachi_tokenizer(
    dict_name: Optional[str] = None,
    split_mode: str = "C",
) -> SudachiTokenizer:
    """
    Build a SudachiPy tokenizer. This call blocks while the dictionary loads.

    Args:
        dict_name: Dictionary package name ('core', 'small', 'full').
                   None uses SudachiPy's configured default.
        split_mode: 'A' (short units), 'B' (middle) or 'C' (long units,
                    named entities kept together).

    Returns:
        SudachiTokenizer: A ready tokenizer handle.

    Raises:
        InitializationError: If SudachiPy is not installed or the
                             dictionary cannot be loaded.
    """
    if not has_sudachi():
        raise InitializationError(
            "sudachipy is not installed. "
            "Install it with: pip install sudachipy sudachidict_core"
        )

    from sudachipy import Dictionary, SplitMode  # type: ignore

    try:
        mode = getattr(SplitMode, split_mode)
    except AttributeError:
        raise InitializationError(f"Unknown Sudachi split mode '{split_mode}'") from None

    try:
        dictionary = Dictionary(dict=dict_name) if dict_name else Dictionary()
        tokenizer = dictionary.create()
    except Exception as e:
        raise InitializationError(f"Failed to load Sudachi dictionary: {e}", cause=e) from e

    return SudachiTokenizer(tokenizer, mode)


class TokenizerState(enum.Enum):
    """Lifecycle states of a TokenizerProvider."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


class TokenizerProvider:
    """
    Builds the analyzer once and hands the same instance to every caller.

    Callers that arrive while a build is in flight wait on that build
    instead of starting another one, and all of them receive its outcome.
    A failed build is not cached: the next ``acquire()`` tries again.
    Once ready, the handle is kept for the lifetime of the provider.

    Attributes:
        state: Current TokenizerState.
        last_error: Exception from the most recent failed build, if any.
        load_attempts: Number of build attempts started.

    Example:
        >>> provider = TokenizerProvider(loader=lambda: MyTokenizer())
        >>> handle = await provider.acquire()
    """

    def __init__(
        self,
        loader: Optional[Callable[[], Any]] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the provider. Nothing is loaded until ``acquire()``.

        Args:
            loader: Zero-argument callable returning a TokenizerHandle.
                    Plain callables run in a daemon thread; coroutine
                    functions are awaited. Defaults to load_sudachi_tokenizer.
            timeout: Seconds allowed for one build attempt. None waits
                     indefinitely. A plain loader that times out keeps
                     running, and the next attempt waits on it instead
                     of starting another load.
        """
        self._loader = loader or load_sudachi_tokenizer
        self._timeout = timeout
        self._handle = None
        self._build_task: Optional[asyncio.Task] = None
        self._pending_load: Optional[concurrent.futures.Future] = None
        self._state = TokenizerState.UNINITIALIZED
        self._last_error: Optional[BaseException] = None
        self._load_attempts = 0

    @property
    def state(self) -> TokenizerState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is TokenizerState.READY

    @property
    def last_error(self) -> Optional[BaseException]:
        return self._last_error

    @property
    def load_attempts(self) -> int:
        return self._load_attempts

    async def acquire(self) -> TokenizerHandle:
        """
        Return the ready tokenizer, building it first if needed.

        Returns:
            TokenizerHandle: The shared tokenizer instance.

        Raises:
            InitializationError: If the build this caller waited on failed.
        """
        if self._handle is not None:
            return self._handle

        if self._build_task is None:
            self._state = TokenizerState.INITIALIZING
            self._build_task = asyncio.ensure_future(self._build())

        # Shielded so one waiter being cancelled does not abort the shared build
        return await asyncio.shield(self._build_task)

    def acquire_sync(self) -> TokenizerHandle:
        """
        Blocking variant of ``acquire()`` for code without an event loop.

        Raises:
            InitializationError: If the build failed.
        """
        if self._handle is not None:
            return self._handle
        return asyncio.run(self.acquire())

    def _start_load_thread(self) -> concurrent.futures.Future:
        future: concurrent.futures.Future = concurrent.futures.Future()
        # Marked running up front so a timed-out waiter cannot cancel it
        future.set_running_or_notify_cancel()

        def run():
            try:
                future.set_result(self._loader())
            except BaseException as e:
                future.set_exception(e)

        # Daemon thread: asyncio.run() and interpreter exit never wait on it
        threading.Thread(target=run, name="bunseki-tokenizer-load", daemon=True).start()
        return future

    async def _load(self) -> TokenizerHandle:
        if inspect.iscoroutinefunction(self._loader):
            handle = self._loader()
        else:
            # A load left running by a timed-out attempt is joined, not repeated
            if self._pending_load is None:
                self._pending_load = self._start_load_thread()
            future = self._pending_load
            try:
                handle = await asyncio.wrap_future(future)
            finally:
                if future.done():
                    self._pending_load = None
        # Callable objects with an async __call__ hand back a coroutine
        if inspect.isawaitable(handle):
            handle = await handle
        return handle

    async def _build(self) -> TokenizerHandle:
        self._load_attempts += 1
        logger.info("Initializing tokenizer (attempt %d)", self._load_attempts)

        try:
            if self._timeout is not None:
                handle = await asyncio.wait_for(self._load(), self._timeout)
            else:
                handle = await self._load()
        except asyncio.CancelledError:
            # Cancelled builds leave no state behind
            self._state = TokenizerState.UNINITIALIZED
            self._build_task = None
            raise
        except Exception as e:
            self._state = TokenizerState.FAILED
            self._last_error = e
            self._build_task = None
            logger.error("Tokenizer initialization failed: %s", e)
            if isinstance(e, InitializationError):
                raise
            if isinstance(e, asyncio.TimeoutError):
                raise InitializationError(
                    f"Tokenizer initialization timed out after {self._timeout}s", cause=e
                ) from e
            raise InitializationError(f"Tokenizer initialization failed: {e}", cause=e) from e

        self._handle = handle
        self._state = TokenizerState.READY
        self._last_error = None
        self._build_task = None
        logger.info("Tokenizer initialized")
        return handle


__all__ = [
    "MAX_INPUT_BYTES",
    "Token",
    "TokenizerHandle",
    "SudachiTokenizer",
    "TokenizerState",
    "TokenizerProvider",
    "has_sudachi",
    "load_sudachi_tokenizer",
    "split_for_analyzer",
]
