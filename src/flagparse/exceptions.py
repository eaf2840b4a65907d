"""Custom exception hierarchy for flagparse.

Lookups in the core never raise: a missing or unparseable value degrades
to ``None``.  Exceptions are reserved for configuration mistakes made by
the calling program (alias registration) and for the CLI layer's
optional UI dependencies.

Hierarchy
---------
FlagParseError
├── InvalidAliasError
├── AliasConflictError
└── EnvironmentError
"""

from __future__ import annotations


class FlagParseError(Exception):
    """Base exception for all flagparse errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Alias configuration ---------------------------------------------------

class InvalidAliasError(FlagParseError):
    """Raised when an alias or primary name is empty after dash stripping."""


class AliasConflictError(FlagParseError):
    """Raised when an alias is already owned by a different primary."""

    def __init__(self, alias: str, owner: str, claimant: str) -> None:
        super().__init__(
            f"Alias '{alias}' already belongs to '{owner}', "
            f"cannot register it for '{claimant}'.",
            hint="An alias can resolve to exactly one primary option.",
        )
        self.alias: str = alias
        self.owner: str = owner
        self.claimant: str = claimant


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(FlagParseError):
    """Raised when an optional runtime dependency is not available."""
