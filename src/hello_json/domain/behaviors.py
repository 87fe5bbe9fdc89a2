"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

#: Key under which the constant greeting value is serialized.
GREETING_KEY: Final[str] = "Hello"
#: The constant greeting value.
GREETING_VALUE: Final[str] = "World"
#: Key under which the invocation arguments are serialized.
ARGS_KEY: Final[str] = "args"


@dataclass(frozen=True, slots=True)
class Greeting:
    """Greeting record holding the constant greeting and the invocation arguments.

    Attributes:
        greeting: Always :data:`GREETING_VALUE`.
        args: Invocation arguments in their original order, program name first
            when built by the entry point.

    Example:
        >>> Greeting(greeting="World", args=("prog", "foo")).as_dict()
        {'Hello': 'World', 'args': ['prog', 'foo']}
    """

    greeting: str
    args: tuple[str, ...]

    def as_dict(self) -> dict[str, object]:
        """Return the mapping form with ``Hello`` ahead of ``args``."""
        return {GREETING_KEY: self.greeting, ARGS_KEY: list(self.args)}


def build_greeting(args: Sequence[str]) -> Greeting:
    """Build the greeting record for the given invocation arguments.

    Arguments are carried over as-is: same order, same count, no filtering.
    Any sequence of strings is accepted, including an empty one.

    Args:
        args: Ordered invocation arguments.

    Returns:
        A fresh, immutable :class:`Greeting`.

    Example:
        >>> build_greeting(["foo", "bar"])
        Greeting(greeting='World', args=('foo', 'bar'))
        >>> build_greeting([]).as_dict()
        {'Hello': 'World', 'args': []}
    """
    return Greeting(greeting=GREETING_VALUE, args=tuple(args))


__all__ = [
    "ARGS_KEY",
    "GREETING_KEY",
    "GREETING_VALUE",
    "Greeting",
    "build_greeting",
]
