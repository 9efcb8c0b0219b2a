"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, TextIO

from ason_query.ason import AsonValue


class DocumentCodec(Protocol):
    """Contract for the structured-text format backend.

    Implementations must map backend-specific exceptions to
    :class:`~ason_query.exceptions.AqError` subclasses.
    """

    def parse(self, text: str) -> AsonValue:
        """Parse *text* into a document value.

        Raises
        ------
        DocumentParseError
            When *text* is not well-formed.  ``detail`` holds the
            backend error rendered against *text*.
        """
        ...  # pragma: no cover

    def render(self, value: AsonValue) -> str:
        """Render *value* to a string."""
        ...  # pragma: no cover

    def render_to(self, stream: TextIO, value: AsonValue) -> None:
        """Render *value* directly onto *stream*."""
        ...  # pragma: no cover


class SourceReader(Protocol):
    """Contract for whatever supplies raw input text."""

    def stdin_is_terminal(self) -> bool:
        """Return ``True`` when STDIN is attached to an interactive terminal."""
        ...  # pragma: no cover

    def read_file(self, path: Path) -> str:
        """Read the whole of *path*.

        Raises
        ------
        InputReadError
            When the file cannot be opened, read, or decoded.
        """
        ...  # pragma: no cover

    def read_stdin(self) -> str:
        """Read STDIN to end-of-stream.

        Raises
        ------
        InputReadError
            When the stream cannot be read or decoded.
        """
        ...  # pragma: no cover


class OutputSink(Protocol):
    """Contract for the two possible output destinations."""

    def write_file(self, path: Path, text: str) -> None:
        """Replace the contents of *path* with *text*.

        Raises
        ------
        OutputWriteError
            When the file cannot be written.
        """
        ...  # pragma: no cover

    def write_stdout(self, render: Callable[[TextIO], None]) -> None:
        """Invoke *render* with the STDOUT stream, then terminate and flush.

        Raises
        ------
        OutputWriteError
            When STDOUT cannot be written (e.g. a closed pipe).
        """
        ...  # pragma: no cover
