"""ASON-backed implementation of :class:`~ason_query.core.protocols.DocumentCodec`.

This module is the **only** place outside :mod:`ason_query.ason` that
touches the format package.  Format errors are caught here and
re-raised as typed :class:`~ason_query.exceptions.AqError` subclasses.
"""

from __future__ import annotations

from typing import TextIO

from ason_query.ason import (
    AsonError,
    AsonParseError,
    AsonValue,
    parse_from_str,
    print_to_string,
    print_to_writer,
)
from ason_query.exceptions import DocumentParseError, OutputWriteError


class AsonCodec:
    """Concrete :class:`DocumentCodec` for ASON text.

    This class satisfies the protocol structurally, with no explicit
    inheritance required.
    """

    def parse(self, text: str) -> AsonValue:
        """Parse *text* as one ASON document.

        Raises
        ------
        DocumentParseError
            With ``detail`` set to the error rendered against *text*,
            including its line, column and an excerpt.
        """
        try:
            return parse_from_str(text)
        except AsonParseError as exc:
            raise DocumentParseError(
                "The text is not a well-formed ASON document.",
                detail=exc.with_source(text),
            ) from exc

    def render(self, value: AsonValue) -> str:
        try:
            return print_to_string(value)
        except AsonError as exc:
            raise OutputWriteError("Fail to render the document.", detail=str(exc)) from exc

    def render_to(self, stream: TextIO, value: AsonValue) -> None:
        try:
            print_to_writer(stream, value)
        except AsonError as exc:
            raise OutputWriteError("Fail to render the document.", detail=str(exc)) from exc
