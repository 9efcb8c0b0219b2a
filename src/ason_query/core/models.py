"""Value objects passed between pipeline stages.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class SourceKind(enum.Enum):
    FILE = "file"
    STDIN = "stdin"
    ARGUMENT = "argument"


STDIN_LABEL = "STDIN"
ARGUMENT_LABEL = "the --text argument"


# ---------------------------------------------------------------------------
# Raw text source
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TextSource:
    """Where one input document comes from.

    The label names the origin in error messages; it is never used to
    locate the data.
    """

    kind: SourceKind
    """Which reader supplies the text."""

    label: str
    """File path, ``STDIN``, or ``the --text argument``."""

    path: Path | None = None
    """Set for :attr:`SourceKind.FILE` only."""

    text: str | None = None
    """Set for :attr:`SourceKind.ARGUMENT` only."""

    @classmethod
    def from_file(cls, path: Path) -> TextSource:
        return cls(kind=SourceKind.FILE, label=str(path), path=path)

    @classmethod
    def from_stdin(cls) -> TextSource:
        return cls(kind=SourceKind.STDIN, label=STDIN_LABEL)

    @classmethod
    def from_text(cls, text: str) -> TextSource:
        return cls(kind=SourceKind.ARGUMENT, label=ARGUMENT_LABEL, text=text)
