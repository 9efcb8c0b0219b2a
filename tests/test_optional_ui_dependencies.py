"""Regression tests for the optional Rich dependency.

These tests verify bootstrap commands, error reporting and logging are
resilient when Rich is missing: the CLI falls back to plain STDERR
output rather than crashing.
"""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

import pytest

from ason_query.cli import exit_codes
from ason_query.cli.app import cli, main
from ason_query.cli.console import get_rich_console
from ason_query.exceptions import EnvironmentError
from ason_query.logging_setup import LOG_LEVEL_ENV, _build_handler, resolve_level


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_pipeline_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    stdout = io.StringIO()

    code = main(["-t", "[1]"], stdout=stdout)

    assert code == exit_codes.SUCCESS
    assert stdout.getvalue() == "[\n    1\n]\n"


def test_rich_console_raises_typed_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_errors_are_reported_in_plain_text(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    missing = tmp_path / "missing.ason"

    with pytest.raises(SystemExit) as exc_info:
        cli([".", str(missing)])

    lines = capsys.readouterr().err.splitlines()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert lines[0] == f'Error: Fail to read the specified input file: "{missing}".'
    assert len(lines) == 2


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    handler = _build_handler()

    assert type(handler) is logging.StreamHandler


class TestResolveLevel:
    def test_default_is_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_level() == logging.WARNING

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert resolve_level() == logging.INFO

    def test_unknown_name_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert resolve_level() == logging.WARNING

    def test_verbose_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        assert resolve_level(verbose=True) == logging.DEBUG
