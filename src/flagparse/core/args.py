"""Public accessor facade over a parsed token sequence.

This is the central class consumed by calling programs.  The token
sequence is classified once, at construction time; every accessor
afterwards is a pure read that resolves aliases, coerces the stored
text, and substitutes defaults.

Guarantees
----------
* No accessor mutates the option map, positionals or skipped tail.
* No accessor raises for a missing key, an unparseable value or an
  out-of-range positional index; they yield ``None`` (or ``[]``).
* Only alias registration may raise, and only
  :class:`~flagparse.exceptions.FlagParseError` subclasses.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from flagparse.core.aliases import AliasTable
from flagparse.core.coercion import coerce, coerce_all
from flagparse.core.models import OptionValues, ParseResult
from flagparse.core.tokenizer import parse

if TYPE_CHECKING:
    from flagparse.core.validator import Validator


class Args:
    """Typed, alias-aware view over one command line.

    Parameters
    ----------
    tokens:
        Raw arguments with the program name already removed.  Use
        :meth:`from_argv` to pass a full ``sys.argv``.
    aliases:
        Optional pre-built alias table.  It stays shared with the caller,
        so registrations made later through either handle are visible.
    """

    def __init__(
        self,
        tokens: Iterable[str] = (),
        aliases: AliasTable | None = None,
    ) -> None:
        self._result: ParseResult = parse(tokens)
        self._aliases: AliasTable = aliases if aliases is not None else AliasTable()

    @classmethod
    def from_argv(
        cls,
        argv: Sequence[str],
        aliases: AliasTable | None = None,
    ) -> Args:
        """Build from a full argument vector, dropping the program name."""
        return cls(argv[1:], aliases)

    # ------------------------------------------------------------------
    # Configuration phase
    # ------------------------------------------------------------------

    def alias(self, primary: str, *aliases: str) -> Args:
        """Register *aliases* for *primary* and return ``self``.

        Raises
        ------
        InvalidAliasError
            If a name is empty after dash stripping.
        AliasConflictError
            If a name already belongs to another primary.
        """
        self._aliases.register(primary, aliases)
        return self

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def aliases(self) -> AliasTable:
        return self._aliases

    @property
    def options(self) -> Mapping[str, OptionValues]:
        return self._result.options

    @property
    def positional(self) -> tuple[str, ...]:
        return self._result.positional

    @property
    def skipped(self) -> tuple[str, ...]:
        return self._result.skipped

    @property
    def result(self) -> ParseResult:
        return self._result

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def get(self, key: str | int, type: Any = str, default: Any = None) -> Any:
        """Return the value of an option or a positional, coerced to *type*.

        Parameters
        ----------
        key:
            An option name (any spelling, dashes optional) or a
            positional index.
        type:
            ``str``, ``bool``, ``int``, ``float`` or any text converter.
        default:
            Returned when the value is absent or cannot be converted.

        Returns
        -------
        object
            For options, the first spelling (primary, then aliases in
            registration order) whose first value converts wins.

        Raises
        ------
        TypeError
            If *key* is a ``bool``, which would otherwise be read as
            positional index 0 or 1, or if *type* is not callable.
        """
        if isinstance(key, bool):
            raise TypeError(f"Argument key must be a name or an index, not {key!r}")
        if isinstance(key, int):
            value = self._positional_value(key, type)
        else:
            value = self._option_value(key, type)
        return default if value is None else value

    def get_multiple(
        self,
        name: str,
        type: Any = str,
        default: Any = None,
    ) -> list[Any]:
        """Return every value of an option, each coerced to *type*.

        The first spelling present in the input supplies the values;
        spellings are not merged.  The result holds one slot per
        occurrence, with *default* (``None`` unless given) in the slots
        that cannot be converted.  An unknown option yields ``[]``.
        """
        for candidate in self._aliases.candidates(name):
            values = self._result.options.get(candidate)
            if values is not None:
                return [
                    default if item is None else item
                    for item in coerce_all(values, type)
                ]
        return []

    # ------------------------------------------------------------------
    # Presence
    # ------------------------------------------------------------------

    def has(self, name: str) -> bool:
        """Return ``True`` when any spelling of *name* appeared."""
        return any(
            candidate in self._result.options
            for candidate in self._aliases.candidates(name)
        )

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def count(self, name: str) -> int:
        """Return the total number of occurrences across all spellings.

        Useful for repeatable switches such as ``-v -v -v``.
        """
        return sum(
            len(self._result.options.get(candidate, ()))
            for candidate in self._aliases.candidates(name)
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> Validator:
        """Return a :class:`~flagparse.core.validator.Validator` bound to this instance."""
        from flagparse.core.validator import Validator

        return Validator(self)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _option_value(self, name: str, type: Any) -> Any:
        for candidate in self._aliases.candidates(name):
            values = self._result.options.get(candidate)
            if values is None:
                continue
            value = coerce(values[0], type)
            if value is not None:
                return value
        return None

    def _positional_value(self, index: int, type: Any) -> Any:
        if not 0 <= index < len(self._result.positional):
            return None
        return coerce(self._result.positional[index], type)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(options={dict(self.options)!r}, "
            f"positional={self.positional!r}, skipped={self.skipped!r})"
        )
