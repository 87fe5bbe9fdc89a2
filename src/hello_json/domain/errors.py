"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Invalid or unreadable configuration.

    Raised when a configuration value cannot be parsed into the expected
    type. Mapped to ``EX_CONFIG`` (78) at the CLI boundary.

    Example:
        >>> from hello_json.domain.errors import ConfigurationError
        >>> err = ConfigurationError("[cli].traceback must be a boolean")
        >>> str(err)
        '[cli].traceback must be a boolean'
    """


class GreetingEncodingError(ValueError):
    """Greeting could not be serialized to UTF-8 JSON.

    Raised when an invocation argument carries characters that have no
    UTF-8 encoding, typically lone surrogates left behind by
    ``surrogateescape`` decoding of invalid bytes in ``argv``.
    Mapped to ``EX_DATAERR`` (65) at the CLI boundary.

    Example:
        >>> from hello_json.domain.errors import GreetingEncodingError
        >>> err = GreetingEncodingError("str is not valid UTF-8: surrogates not allowed")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "GreetingEncodingError",
]
