"""Process exit codes returned by the ``flagparse`` inspection tool.

:func:`flagparse.cli.app.cli` is the only place these are handed to
``sys.exit``; :func:`flagparse.cli.app.main` returns them to callers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Tokens inspected, or version / usage shown."""

GENERAL_ERROR: int = 1
"""A bad ``--alias`` declaration or alias conflict was reported."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted by Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""
