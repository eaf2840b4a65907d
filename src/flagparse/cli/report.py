"""Rendering of a parsed token sequence for the ``flagparse`` tool.

This module is responsible for:

* Turning an :class:`~flagparse.core.args.Args` into display rows.
* Rendering those rows as Rich tables, or as plain text when Rich is
  not installed.

No parsing happens here; the rows are read from already-built state.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from flagparse.cli.console import console, rich_available
from flagparse.core.args import Args

_BARE_FLAG: str = "(flag)"

Row = tuple[str, ...]


# ---------------------------------------------------------------------------
# Row builders (pure, no I/O)
# ---------------------------------------------------------------------------

def _format_value(value: str | None) -> str:
    """Render a stored value, showing bare occurrences as ``(flag)``."""
    if value is None:
        return _BARE_FLAG
    return repr(value)


def option_rows(args: Args) -> list[Row]:
    """Return ``(name, resolves-to, values)`` for every parsed option."""
    rows: list[Row] = []
    for name, values in args.options.items():
        primary = args.aliases.primary_of(name)
        resolves = primary if primary is not None and primary != name else "—"
        rendered = ", ".join(_format_value(value) for value in values)
        rows.append((name, resolves, rendered))
    return rows


def sequence_rows(items: Sequence[str]) -> list[Row]:
    """Return ``(index, token)`` rows for positionals or the skipped tail."""
    return [(str(index), repr(item)) for index, item in enumerate(items)]


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def _rich_table(title: str, headers: Sequence[str], rows: Sequence[Row]) -> Any:
    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    return table


def _print_plain_table(title: str, headers: Sequence[str], rows: Sequence[Row]) -> None:
    """Render one section without Rich."""
    print(f"\n{title}", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print("  ".join(f"{header:<16}" for header in headers).rstrip(), file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for row in rows:
        print("  ".join(f"{cell:<16}" for cell in row).rstrip(), file=sys.stderr)


def render(args: Args) -> None:
    """Render options, positionals and the skipped tail of *args*."""
    sections: list[tuple[str, tuple[str, ...], list[Row]]] = [
        ("Options", ("Name", "Alias of", "Values"), option_rows(args)),
        ("Positional", ("Index", "Token"), sequence_rows(args.positional)),
        ("Skipped", ("Index", "Token"), sequence_rows(args.skipped)),
    ]

    if not rich_available():
        for title, headers, rows in sections:
            _print_plain_table(title, headers, rows)
        print(file=sys.stderr)
        return

    for title, headers, rows in sections:
        console.print(_rich_table(title, headers, rows))
    console.print()
