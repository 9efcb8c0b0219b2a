"""Output dispatch — renders the root document to exactly one sink."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from ason_query.ason import AsonValue
from ason_query.core.protocols import DocumentCodec, OutputSink

logger = logging.getLogger(__name__)


class OutputWriter:
    """Sends the rendered root document to a file or to STDOUT.

    Parameters
    ----------
    codec:
        Renders the document.
    sink:
        Performs the actual write and maps I/O failures.
    """

    def __init__(self, codec: DocumentCodec, sink: OutputSink) -> None:
        self._codec: DocumentCodec = codec
        self._sink: OutputSink = sink

    def write(self, root: AsonValue, output: Path | None) -> None:
        """Render *root* to *output*, or to STDOUT when *output* is ``None``.

        Raises
        ------
        OutputWriteError
            When the destination cannot be written.
        """
        if output is not None:
            text = self._codec.render(root)
            self._sink.write_file(output, text + "\n")
            logger.debug("Wrote %d characters to %s.", len(text) + 1, output)
            return

        def render(stream: TextIO) -> None:
            self._codec.render_to(stream, root)

        self._sink.write_stdout(render)
