"""Conversion of raw option values into requested types.

Every function in this module is a **pure** transformation.  Bad input
never raises: a value that cannot be converted becomes ``None``, so
callers can tell "not given" and "not parseable" apart from a real
value, but never have to catch anything.  A *target* that is not
callable is a programming error and raises ``TypeError``.

Per-type policy
---------------
* ``str`` — identity.  Python strings are immutable, so ``str`` also
  serves as the raw string-slice type.
* ``int`` — strict ``int(text)``.  ``"42.42"``, ``"42abc"`` and digit
  underscores (``"1_000"``) fail; a float spelling is never truncated.
* ``float`` — ``float(text)`` restricted to finite values written
  without underscores; ``"nan"``, ``"inf"`` and ``"1_0.5"`` fail.
* ``bool`` — a bare flag is ``True``; otherwise the value is ``False``
  only when it is one of :data:`~flagparse.utils.constants.FALSITIES`
  (case-sensitive).
* anything else — called as a :class:`~flagparse.core.protocols.TextConverter`.
"""

from __future__ import annotations

from collections.abc import Iterable
import math
from typing import Any, TypeVar, overload

from flagparse.core.protocols import TextConverter
from flagparse.utils.constants import FALSITIES

T = TypeVar("T")

_CONVERSION_ERRORS: tuple[type[Exception], ...] = (
    ValueError,
    TypeError,
    ArithmeticError,
)


# ---------------------------------------------------------------------------
# Per-type converters
# ---------------------------------------------------------------------------

def to_bool(raw: str | None) -> bool:
    """Apply the truthiness rule to a value of an option known to exist.

    A bare flag (``raw is None``) is truthy by presence alone.
    """
    if raw is None:
        return True
    return raw not in FALSITIES


def _parse_int(text: str) -> int:
    if "_" in text:
        raise ValueError(f"Digit separators are not accepted: {text!r}")
    return int(text)


def _parse_float(text: str) -> float:
    if "_" in text:
        raise ValueError(f"Digit separators are not accepted: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    return value


def _convert(raw: str, target: TextConverter[T]) -> T | None:
    converter: TextConverter[Any] = target
    if target is int:
        converter = _parse_int
    elif target is float:
        converter = _parse_float
    try:
        return converter(raw)
    except _CONVERSION_ERRORS:
        return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

@overload
def coerce(raw: str | None, target: type[bool]) -> bool: ...


@overload
def coerce(raw: str | None, target: TextConverter[T]) -> T | None: ...


def coerce(raw: str | None, target: Any = str) -> Any:
    """Convert one raw value of an existing option into *target*.

    Parameters
    ----------
    raw:
        The stored value, or ``None`` for a bare occurrence.
    target:
        ``str``, ``bool``, ``int``, ``float`` or any text converter.

    Returns
    -------
    object | None
        The converted value, or ``None`` when there is nothing to convert
        or the conversion failed.  ``bool`` never yields ``None`` here
        because a bare flag is truthy; key absence is decided by the
        caller before this function is reached.

    Raises
    ------
    TypeError
        If *target* is not callable.
    """
    if not callable(target):
        raise TypeError(f"{target!r} is not a text converter")
    if target is bool:
        return to_bool(raw)
    if raw is None:
        return None
    if target is str:
        return raw
    return _convert(raw, target)


def coerce_all(
    values: Iterable[str | None],
    target: Any = str,
) -> list[Any]:
    """Coerce every entry independently, keeping one slot per input.

    An entry that cannot be converted yields ``None`` at its position
    rather than being dropped.
    """
    return [coerce(value, target) for value in values]


def type_name(target: Any) -> str:
    """Return a readable name for *target* (``"int"``, ``"Path"``...)."""
    return getattr(target, "__name__", None) or type(target).__name__
