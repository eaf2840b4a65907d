"""Single-pass tokenizer that classifies raw command-line tokens.

Every token is visited once, left to right, with one piece of local
state: the *pending* option, an option name still waiting for its value.

Classification rules
--------------------
1. ``--`` — flush the pending option, move every remaining token
   verbatim into the skipped tail, stop.
2. ``""`` — flush the pending option; otherwise contributes nothing.
3. ``-name`` — flush the pending option, strip all leading dashes.
   ``name=value`` is committed at once (packed form); a plain ``name``
   becomes pending.
4. anything else — value of the pending option, or a positional.

After the last token a still-pending option is flushed as a bare flag.

The caller's sequence is never mutated and no input makes this raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from flagparse.core.models import OptionValues, ParseResult
from flagparse.utils.constants import ASSIGNMENT, OPTION_PREFIX, SEPARATOR

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Token helpers (pure)
# ---------------------------------------------------------------------------

def is_option(token: str) -> bool:
    """Return ``True`` when *token* is non-empty and starts with a dash."""
    return token[:1] == OPTION_PREFIX


def split_option(token: str) -> tuple[str, str | None]:
    """Strip leading dashes and split a packed ``name=value`` form.

    Returns the option name and its inline value, or ``None`` when the
    token carries no ``=``.  Only the first ``=`` splits, so
    ``--define=a=b`` yields ``("define", "a=b")``.
    """
    name = token.lstrip(OPTION_PREFIX)
    if ASSIGNMENT in name:
        name, value = name.split(ASSIGNMENT, 1)
        return name, value
    return name, None


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------

def parse(tokens: Iterable[str]) -> ParseResult:
    """Classify *tokens* into options, positionals and a skipped tail.

    Parameters
    ----------
    tokens:
        Raw arguments with the program name already removed.

    Returns
    -------
    ParseResult
        Immutable classification of the whole sequence.
    """
    items = list(tokens)
    options: dict[str, list[str | None]] = {}
    positional: list[str] = []
    skipped: list[str] = []
    pending: str | None = None

    def commit(name: str, value: str | None) -> None:
        options.setdefault(name, []).append(value)

    for index, token in enumerate(items):
        if token == SEPARATOR:
            if pending is not None:
                commit(pending, None)
                pending = None
            skipped.extend(items[index + 1:])
            break

        if not token:
            if pending is not None:
                commit(pending, None)
                pending = None
            continue

        if is_option(token):
            if pending is not None:
                commit(pending, None)
            name, value = split_option(token)
            if value is None:
                pending = name
            else:
                commit(name, value)
                pending = None
            continue

        if pending is not None:
            commit(pending, token)
            pending = None
        else:
            positional.append(token)

    if pending is not None:
        commit(pending, None)

    logger.debug(
        "Parsed %d token(s): %d option(s), %d positional, %d skipped",
        len(items),
        len(options),
        len(positional),
        len(skipped),
    )

    frozen: dict[str, OptionValues] = {
        name: tuple(values) for name, values in options.items()
    }
    return ParseResult(
        options=MappingProxyType(frozen),
        positional=tuple(positional),
        skipped=tuple(skipped),
    )
