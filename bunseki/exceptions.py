"""
Custom exceptions for the bunseki package.

This module defines exception classes used throughout the bunseki library
to provide clear error messages for various failure conditions.
"""


class BunsekiError(Exception):
    """
    Base exception class for all bunseki-related errors.

    This exception serves as the parent class for more specific exceptions
    and can be used to catch any error raised by the bunseki library.

    Example:
        >>> try:
        ...     count_words(text, "ja", tokenizer=None)
        ... except BunsekiError as e:
        ...     print(f"Bunseki error: {e}")
    """
    pass


class InitializationError(BunsekiError):
    """
    Raised when the morphological analyzer cannot be built.

    This exception is raised when:
    - SudachiPy (or its dictionary package) is not installed
    - The dictionary fails to load
    - Loading takes longer than the configured timeout

    The failure is not permanent: the next request starts a new attempt.

    Attributes:
        cause: The underlying exception raised by the loader.
    """

    def __init__(self, message: str, cause: BaseException = None):
        super().__init__(message)
        self.cause = cause


class TokenizerUnavailable(BunsekiError):
    """
    Raised when an operation needs a tokenizer and none is ready.
    """
    pass


class InputReadError(BunsekiError):
    """
    Raised when the source text cannot be obtained.

    Attributes:
        path: The path that could not be read, if any.
    """

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class MalformedInput(BunsekiError):
    """
    Raised when request parameters are invalid.

    This exception is raised when:
    - An unknown language is requested
    - Both or neither of text and path are given
    - A configuration value cannot be parsed
    """
    pass
