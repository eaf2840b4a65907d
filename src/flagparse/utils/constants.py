"""Grammar constants for the command-line token language.

Every literal the tokenizer and the coercion layer compare against lives
here so that the grammar is stated once.
"""

from __future__ import annotations

SEPARATOR: str = "--"
"""A token exactly equal to this ends structured parsing."""

OPTION_PREFIX: str = "-"
"""Leading character that marks a token as an option."""

ASSIGNMENT: str = "="
"""Splits a packed ``--name=value`` token at its first occurrence."""

FALSITIES: frozenset[str] = frozenset({"0", "n", "no", "f", "false"})
"""Values that make a boolean option falsy.  Compared case-sensitively."""
