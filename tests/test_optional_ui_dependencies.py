"""Regression tests for the optional Rich dependency.

The inspection tool must keep working without Rich, falling back to
plain text on stderr.
"""

from __future__ import annotations

import sys

import pytest

from flagparse.cli import exit_codes
from flagparse.cli.app import main
from flagparse.cli.console import escape_markup, get_rich_console, rich_available
from flagparse.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_rich_reported_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert not rich_available()
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_version_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--version"]) == exit_codes.SUCCESS
    assert "flagparse" in capsys.readouterr().err


def test_render_falls_back_to_plain_text(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--", "pos", "--n", "3"]) == exit_codes.SUCCESS
    err = capsys.readouterr().err
    assert "Options" in err
    assert "'3'" in err
    assert "'pos'" in err


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape_markup("[/x]") == "[/x]"
