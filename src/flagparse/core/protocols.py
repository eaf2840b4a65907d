"""Protocols (interfaces) consumed by the core layer.

A requested value type is anything that can build itself from text.
Builtins such as ``int``, ``float`` and ``complex`` satisfy
:class:`TextConverter` structurally, as do ``pathlib.Path``,
``decimal.Decimal`` and any user-supplied ``def parse(text) -> T``.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class TextConverter(Protocol[T_co]):
    """Contract for value types requested from the accessors.

    Any callable that accepts a single ``str`` and either returns the
    converted value or raises ``ValueError`` / ``TypeError`` /
    ``ArithmeticError`` on malformed input satisfies this protocol.
    """

    def __call__(self, text: str, /) -> T_co:
        """Convert *text* into the target type.

        Raises
        ------
        ValueError
            When *text* is not a valid spelling of the target type.
        """
        ...  # pragma: no cover
