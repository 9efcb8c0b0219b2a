"""Shared pytest fixtures and configuration for the ason-query test suite.

Guidelines
----------
* No real terminal: STDIN/STDOUT are replaced with in-memory streams.
* Files are created under ``tmp_path`` only.
* Core tests use fakes for the reader, sink and codec protocols.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from ason_query.infra.ason_codec import AsonCodec


class TerminalStdin(io.StringIO):
    """STDIN attached to an interactive terminal."""

    def isatty(self) -> bool:
        return True


class UnreadableTerminalStdin(TerminalStdin):
    """Terminal STDIN that fails the test if anything reads it."""

    def read(self, size: int | None = -1) -> str:
        raise AssertionError("STDIN must not be read")


@pytest.fixture()
def codec() -> AsonCodec:
    return AsonCodec()


@pytest.fixture()
def write_doc(tmp_path: Path) -> Callable[[str, str], Path]:
    """Create ``tmp_path / name`` holding *text* and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def terminal_stdin() -> TerminalStdin:
    return TerminalStdin("")


@pytest.fixture()
def unreadable_stdin() -> UnreadableTerminalStdin:
    return UnreadableTerminalStdin("")
