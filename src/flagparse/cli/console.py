"""Output helpers for the inspection tool, with optional Rich support.

Rich is imported only when something is rendered, so ``--version`` and
the usage line still work on an interpreter without it.  Text that
comes from the command line (tokens, alias declarations, error
messages quoting them) must pass through :func:`escape_markup` before
it is embedded in a markup string.
"""

from __future__ import annotations

import sys
from typing import Any

from flagparse.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def rich_available() -> bool:
    """Return ``True`` when Rich tables can be rendered."""
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


def escape_markup(text: object) -> str:
    """Return ``str(text)`` with Rich markup brackets neutralised.

    Without Rich the proxy prints plain text, so nothing needs escaping.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return str(text)
    return escape(str(text))


class _ConsoleProxy:
    """``print``-compatible sink: Rich on stderr, or plain stderr text."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
