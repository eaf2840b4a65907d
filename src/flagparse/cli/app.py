"""CLI application entry point for the ``flagparse`` inspection tool.

The tool shows how a token sequence is classified::

    flagparse [--alias PRIMARY=A,B]... [--version] [--help] -- TOKEN...

Its own arguments are parsed with :class:`~flagparse.core.args.Args`;
everything after the first ``--`` lands in the skipped tail and is
parsed again, this time as the sequence to inspect.

This module is the **sole error boundary** for the tool.  It catches
:class:`~flagparse.exceptions.FlagParseError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.
"""

from __future__ import annotations

import sys

from flagparse.cli import exit_codes
from flagparse.cli.console import console, escape_markup
from flagparse.core.aliases import AliasTable
from flagparse.core.args import Args
from flagparse.exceptions import FlagParseError
from flagparse.utils.constants import ASSIGNMENT
from flagparse.version import __version__

USAGE: str = "usage: flagparse [--alias PRIMARY=A,B]... [--version] [--help] -- TOKEN..."


# ---------------------------------------------------------------------------
# Tool arguments
# ---------------------------------------------------------------------------

def _tool_args(argv: list[str]) -> Args:
    """Parse the tool's own arguments."""
    return (
        Args(argv)
        .alias("alias", "a")
        .alias("version", "V")
        .alias("help", "h")
    )


def parse_alias_spec(spec: str | None) -> tuple[str, list[str]]:
    """Split ``PRIMARY=A,B`` into the primary and its aliases.

    Raises
    ------
    FlagParseError
        If *spec* is missing or has no ``=``.
    """
    if not spec or ASSIGNMENT not in spec:
        raise FlagParseError(
            f"Invalid alias declaration: {spec!r}",
            hint="Use --alias PRIMARY=ALIAS[,ALIAS...], e.g. --alias verbose=v",
        )
    primary, names = spec.split(ASSIGNMENT, 1)
    return primary, [name for name in names.split(",") if name]


def build_alias_table(specs: list[str | None]) -> AliasTable:
    """Build an :class:`AliasTable` from ``--alias`` declarations."""
    table = AliasTable()
    for spec in specs:
        primary, names = parse_alias_spec(spec)
        table.register(primary, names)
    return table


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the flagparse inspection tool.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from flagparse.cli.report import render

    tool = _tool_args(sys.argv[1:] if argv is None else argv)

    if tool.get("version", bool):
        console.print(f"flagparse {__version__}")
        return exit_codes.SUCCESS

    if tool.get("help", bool) or not tool.skipped:
        console.print(USAGE)
        return exit_codes.SUCCESS

    aliases = build_alias_table(tool.get_multiple("alias"))
    render(Args(tool.skipped, aliases))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FlagParseError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
