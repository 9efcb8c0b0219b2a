"""Custom exception hierarchy for ason-query.

All exceptions that cross layer boundaries must inherit from
:class:`AqError`.  Raw exceptions from the format layer or the OS must
NEVER reach the CLI boundary — the stage that triggers them catches
them and re-raises a typed subclass defined here.

Hierarchy
---------
AqError
├── UsageError
├── InputReadError
├── DocumentParseError
├── AggregationError
├── OutputWriteError
└── EnvironmentError
"""

from __future__ import annotations


class AqError(Exception):
    """Base exception for all ason-query errors.

    The message is the human-context line (what failed, and where).
    ``detail`` carries the underlying error text, reported on its own
    line below the message.
    """

    def __init__(
        self,
        message: str,
        *,
        detail: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.detail: str | None = detail
        """Underlying error message (I/O error, rendered parse error)."""
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(AqError):
    """Raised when the tool is invoked interactively with nothing to do."""


# --- Input -----------------------------------------------------------------

class InputReadError(AqError):
    """Raised when an input file or STDIN cannot be read."""


class DocumentParseError(AqError):
    """Raised when a source text is not a well-formed ASON document."""


# --- Aggregation -----------------------------------------------------------

class AggregationError(AqError):
    """Raised when there is no document to aggregate."""


# --- Output ----------------------------------------------------------------

class OutputWriteError(AqError):
    """Raised when the output file or STDOUT cannot be written."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(AqError):
    """Raised when an optional runtime dependency is not available."""
