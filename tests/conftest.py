"""Shared pytest fixtures and configuration for the flagparse test suite.

Guidelines
----------
* Core tests must be pure — no I/O, no side effects.
* CLI tests call ``main(argv)`` directly and read captured stderr.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from flagparse.core.args import Args


@pytest.fixture()
def foo_args() -> Args:
    """Repeated option with a registered long spelling."""
    return Args(["-f", "42", "--bar", "43", "-f", "7"]).alias("f", "foo")
