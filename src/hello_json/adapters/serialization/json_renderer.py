"""Compact JSON rendering of the greeting record via orjson."""

from __future__ import annotations

import orjson

from hello_json.domain.behaviors import Greeting
from hello_json.domain.errors import GreetingEncodingError


def render_greeting(greeting: Greeting) -> str:
    """Serialize *greeting* to compact, single-line JSON.

    orjson emits no insignificant whitespace and writes non-ASCII characters
    as UTF-8 rather than ``\\u`` escapes. Key order follows
    :meth:`Greeting.as_dict`. The result carries no trailing newline.

    Args:
        greeting: Record to serialize.

    Returns:
        JSON text such as ``{"Hello":"World","args":["prog"]}``.

    Raises:
        GreetingEncodingError: If an argument holds characters without a
            UTF-8 encoding (lone surrogates).

    Examples:
        >>> from hello_json.domain.behaviors import build_greeting
        >>> render_greeting(build_greeting(["prog", "foo", "bar"]))
        '{"Hello":"World","args":["prog","foo","bar"]}'
        >>> render_greeting(build_greeting([]))
        '{"Hello":"World","args":[]}'
    """
    try:
        payload = orjson.dumps(greeting.as_dict())
    except orjson.JSONEncodeError as exc:
        raise GreetingEncodingError(f"Cannot encode invocation arguments: {exc}") from exc
    return payload.decode("utf-8")


__all__ = ["render_greeting"]
