"""Domain models for flagparse.

All models are **frozen** dataclasses — immutable value objects built
once and read for the rest of the process.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


OptionValues = tuple[str | None, ...]
"""Ordered values of one option; ``None`` marks a bare occurrence."""


def _empty_options() -> Mapping[str, OptionValues]:
    return MappingProxyType({})


# ---------------------------------------------------------------------------
# Tokenizer output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseResult:
    """Classification of one token sequence.

    Built in a single pass by :func:`~flagparse.core.tokenizer.parse`.
    The option map is exposed through a read-only mapping proxy so that
    neither the keys nor the value tuples can be changed afterwards.
    """

    options: Mapping[str, OptionValues] = field(default_factory=_empty_options)
    """Option name (dashes stripped) → values in order of appearance."""

    positional: tuple[str, ...] = ()
    """Tokens not attached to a preceding option, in order."""

    skipped: tuple[str, ...] = ()
    """Verbatim tokens that followed the ``--`` separator."""

    def __contains__(self, name: object) -> bool:
        return name in self.options


# ---------------------------------------------------------------------------
# Validation record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValidationEntry:
    """Outcome of checking one declared option against the parsed input."""

    name: str
    """Primary option name as declared."""

    type_name: str
    """Human-readable name of the requested type (e.g. ``"int"``)."""

    description: str
    """Free-form description supplied at declaration time."""

    required: bool
    """Whether the option must be present."""

    present: bool
    """Whether any spelling of the option appeared in the input."""

    valid: bool
    """Whether the input satisfies the declaration."""
