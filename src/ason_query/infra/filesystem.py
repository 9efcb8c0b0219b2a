"""Infrastructure: files and standard streams.

Implements both :class:`~ason_query.core.protocols.SourceReader` and
:class:`~ason_query.core.protocols.OutputSink`.  Every ``OSError`` (and
encoding or decoding error) is caught here and re-raised as an
:class:`~ason_query.exceptions.InputReadError` or
:class:`~ason_query.exceptions.OutputWriteError` naming the path or
stream involved.

Rules
-----
* No user-facing output — callers render errors.
* Each file is opened, fully read or written, and closed in one call.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from ason_query.exceptions import InputReadError, OutputWriteError

ENCODING = "utf-8"


class StandardStreams:
    """Reads files and STDIN, writes files and STDOUT.

    Parameters
    ----------
    stdin, stdout:
        Text streams to use instead of :data:`sys.stdin` and
        :data:`sys.stdout`.  Resolved lazily so that a redirected
        ``sys.stdout`` is honoured.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    # ------------------------------------------------------------------
    # SourceReader
    # ------------------------------------------------------------------

    def stdin_is_terminal(self) -> bool:
        stream = self.stdin
        try:
            return stream.isatty()
        except (AttributeError, ValueError):
            # closed or detached stream
            return False

    def read_file(self, path: Path) -> str:
        try:
            return path.read_text(encoding=ENCODING)
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(
                f'Fail to read the specified input file: "{path}".',
                detail=str(exc),
            ) from exc

    def read_stdin(self) -> str:
        try:
            return self.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(
                "Fail to read the input text from STDIN.",
                detail=str(exc),
            ) from exc

    # ------------------------------------------------------------------
    # OutputSink
    # ------------------------------------------------------------------

    def write_file(self, path: Path, text: str) -> None:
        try:
            path.write_text(text, encoding=ENCODING)
        except (OSError, UnicodeEncodeError) as exc:
            raise OutputWriteError(
                f'Fail to write to the output file: "{path}".',
                detail=str(exc),
            ) from exc

    def write_stdout(self, render: Callable[[TextIO], None]) -> None:
        stream = self.stdout
        try:
            render(stream)
            stream.write("\n")
            stream.flush()
        except (OSError, UnicodeEncodeError) as exc:
            raise OutputWriteError("Fail to write to the STDOUT.", detail=str(exc)) from exc
