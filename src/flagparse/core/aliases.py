"""Alias table mapping primary option names to their alternate spellings.

A primary owns an ordered list of synonyms, itself first.  Every name in
that list maps back to the primary, so a lookup by any spelling tries
the same candidates in the same order.

Names are normalised by stripping leading dashes, matching the
tokenizer's rule that ``-f``, ``--f`` and ``---f`` are the same option.

Conflict policy
---------------
An alias belongs to at most one primary.  Claiming a name already owned
by a different primary raises
:class:`~flagparse.exceptions.AliasConflictError` and leaves the table
exactly as it was; no partial registration is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from flagparse.exceptions import AliasConflictError, InvalidAliasError
from flagparse.utils.constants import OPTION_PREFIX

logger = logging.getLogger(__name__)


def normalize(name: str) -> str:
    """Strip leading dashes from *name*."""
    return name.lstrip(OPTION_PREFIX)


class AliasTable:
    """Mutable registry of option aliases, filled before any lookup.

    The table is expected to be configured once and then only read.
    Concurrent registration without external locking is unsupported.
    """

    def __init__(self) -> None:
        self._synonyms: dict[str, list[str]] = {}
        self._primary_of: dict[str, str] = {}

    # ------------------------------------------------------------------
    # Configuration phase
    # ------------------------------------------------------------------

    def register(self, primary: str, aliases: Iterable[str] = ()) -> AliasTable:
        """Declare *aliases* as alternate spellings of *primary*.

        Registering the same primary again appends new aliases after the
        existing ones; names already in its list are ignored.

        Raises
        ------
        InvalidAliasError
            If *primary* or any alias is empty after dash stripping.
        AliasConflictError
            If *primary* or any alias belongs to a different primary.
        """
        key = self._checked(primary)
        names = [self._checked(alias) for alias in aliases]

        for name in [key, *names]:
            owner = self._primary_of.get(name)
            if owner is not None and owner != key:
                raise AliasConflictError(name, owner, key)

        synonyms = self._synonyms.setdefault(key, [key])
        self._primary_of[key] = key
        for name in names:
            if name not in synonyms:
                synonyms.append(name)
                self._primary_of[name] = key

        logger.debug("Registered aliases for '%s': %s", key, synonyms[1:])
        return self

    @staticmethod
    def _checked(name: str) -> str:
        key = normalize(name)
        if not key:
            raise InvalidAliasError(
                f"Invalid option name: {name!r}",
                hint="Option names need at least one character after the dashes.",
            )
        return key

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def candidates(self, name: str) -> list[str]:
        """Return the keys to try for *name*, primary first.

        An unregistered name yields only itself.
        """
        key = normalize(name)
        primary = self._primary_of.get(key)
        if primary is None:
            return [key]
        return list(self._synonyms[primary])

    def primary_of(self, name: str) -> str | None:
        """Return the primary owning *name*, or ``None`` if unregistered."""
        return self._primary_of.get(normalize(name))

    def aliases_of(self, primary: str) -> tuple[str, ...]:
        """Return the alternate spellings of *primary*, excluding itself."""
        synonyms = self._synonyms.get(normalize(primary), ())
        return tuple(synonyms[1:])

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize(name) in self._primary_of

    def __iter__(self) -> Iterator[str]:
        return iter(self._synonyms)

    def __len__(self) -> int:
        return len(self._synonyms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._synonyms!r})"
