"""Typed invocation configuration.

Built once by the CLI layer from the parsed arguments and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Configuration:
    """Everything a single ``aq`` invocation needs to know."""

    output: Path | None = None
    """Destination file.  ``None`` means STDOUT."""

    query_file: Path | None = None
    """Path of a query file.  Recorded only; queries are not evaluated."""

    query_expression: str | None = None
    """Query string given on the command line.  Recorded only."""

    input_files: tuple[Path, ...] = ()
    """Input documents in the order given.  Empty means STDIN."""

    input_text: str | None = None
    """Inline document text.  Takes precedence over every other source."""

    verbose: bool = False
    """Emit debug logging on STDERR."""

    @property
    def has_query(self) -> bool:
        return self.query_expression is not None
