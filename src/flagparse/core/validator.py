"""Declarative check of parsed options against an expected schema.

The validator only records outcomes.  Rendering usage text or ending
the process on failure is left to the calling program.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flagparse.core.aliases import normalize
from flagparse.core.coercion import type_name
from flagparse.core.models import ValidationEntry

if TYPE_CHECKING:
    from flagparse.core.args import Args


class Validator:
    """Collect :class:`ValidationEntry` records for declared options.

    Declarations are chainable::

        report = (
            args.validate()
            .require("port", int, "TCP port to bind")
            .optional("verbose", bool, "Chatty output")
        )
        if not report.is_valid:
            ...
    """

    def __init__(self, args: Args) -> None:
        self._args: Args = args
        self._entries: list[ValidationEntry] = []

    def require(self, name: str, type: Any = str, description: str = "") -> Validator:
        """Declare an option that must be present and convertible."""
        self._add(name, type, description, required=True)
        return self

    def optional(self, name: str, type: Any = str, description: str = "") -> Validator:
        """Declare an option that, when present, must be convertible."""
        self._add(name, type, description, required=False)
        return self

    def _add(self, name: str, type: Any, description: str, *, required: bool) -> None:
        present = self._args.has(name)
        if not present:
            valid = not required
        else:
            valid = self._args.get(name, type) is not None
        self._entries.append(
            ValidationEntry(
                name=normalize(name),
                type_name=type_name(type),
                description=description,
                required=required,
                present=present,
                valid=valid,
            )
        )

    @property
    def entries(self) -> tuple[ValidationEntry, ...]:
        return tuple(self._entries)

    @property
    def failures(self) -> tuple[ValidationEntry, ...]:
        return tuple(entry for entry in self._entries if not entry.valid)

    @property
    def is_valid(self) -> bool:
        return not self.failures

    def __bool__(self) -> bool:
        return self.is_valid
