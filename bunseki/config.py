"""
Runtime settings for bunseki.

Settings are read from environment variables so that the MCP server and the
web application can be configured without code changes.

Environment variables:
    BUNSEKI_SUDACHI_DICT: SudachiPy dictionary name ('core', 'small', 'full').
    BUNSEKI_SPLIT_MODE: SudachiPy split mode, 'A', 'B' or 'C' (default 'C').
    BUNSEKI_INIT_TIMEOUT: Seconds allowed for one dictionary load attempt.
    BUNSEKI_LOG_LEVEL: Logging level used by the transports (default 'INFO').
    BUNSEKI_WARMUP: Set to '0' or 'false' to skip tokenizer warm-up.

Example:
    >>> from bunseki.config import Settings
    >>> settings = Settings.from_env()
    >>> settings.split_mode
    'C'
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import MalformedInput


SPLIT_MODES = ("A", "B", "C")

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Holds the configuration shared by the service and its transports."""

    sudachi_dict: Optional[str] = None
    split_mode: str = "C"
    init_timeout: Optional[float] = None
    log_level: str = "INFO"
    warmup: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Settings: Parsed settings, with defaults for unset variables.

        Raises:
            MalformedInput: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ

        split_mode = env.get("BUNSEKI_SPLIT_MODE", "C").strip().upper() or "C"
        if split_mode not in SPLIT_MODES:
            raise MalformedInput(
                f"BUNSEKI_SPLIT_MODE must be one of {', '.join(SPLIT_MODES)}, "
                f"got '{split_mode}'"
            )

        raw_timeout = env.get("BUNSEKI_INIT_TIMEOUT", "").strip()
        init_timeout = None
        if raw_timeout:
            try:
                init_timeout = float(raw_timeout)
            except ValueError:
                raise MalformedInput(
                    f"BUNSEKI_INIT_TIMEOUT must be a number, got '{raw_timeout}'"
                ) from None
            if init_timeout <= 0:
                raise MalformedInput("BUNSEKI_INIT_TIMEOUT must be positive")

        log_level = env.get("BUNSEKI_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(log_level), int):
            raise MalformedInput(f"Unknown BUNSEKI_LOG_LEVEL '{log_level}'")

        sudachi_dict = env.get("BUNSEKI_SUDACHI_DICT", "").strip() or None
        warmup = env.get("BUNSEKI_WARMUP", "1").strip().lower() not in _FALSE_VALUES

        return cls(
            sudachi_dict=sudachi_dict,
            split_mode=split_mode,
            init_timeout=init_timeout,
            log_level=log_level,
            warmup=warmup,
        )
