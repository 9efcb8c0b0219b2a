"""Errors raised by the ASON parser and printer."""

from __future__ import annotations

from dataclasses import dataclass


class AsonError(Exception):
    """Base class for every error raised by :mod:`ason_query.ason`."""


@dataclass(frozen=True, slots=True)
class Location:
    """1-based line and column of a character offset in a source text."""

    line: int
    column: int

    @classmethod
    def from_offset(cls, source: str, offset: int) -> Location:
        offset = max(0, min(offset, len(source)))
        line = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(line=line, column=offset - line_start + 1)


class AsonParseError(AsonError):
    """Raised when a text is not a well-formed ASON document.

    ``offset`` is the character index of the offending token within the
    parsed text.  The message itself carries no position, so the same
    error can be rendered against the source with :meth:`with_source`.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset

    def location(self, source: str) -> Location:
        return Location.from_offset(source, self.offset)

    def with_source(self, source: str) -> str:
        """Render the error with its line, column and a caret excerpt.

        Example::

            line 2, column 10: expected ':' after the object key
               2 |     name "John"
                 |          ^
        """
        loc = self.location(source)
        lines = source.split("\n")
        text = lines[loc.line - 1] if loc.line - 1 < len(lines) else ""
        text = text.rstrip("\r").expandtabs(1)
        gutter = " " * len(str(loc.line))
        return "\n".join(
            (
                f"line {loc.line}, column {loc.column}: {self.message}",
                f"  {loc.line} | {text}",
                f"  {gutter} | {' ' * (loc.column - 1)}^",
            )
        )
