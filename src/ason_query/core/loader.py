"""Multi-document loader — reads and parses every selected source.

Sources are processed strictly in order and fail fast: the first source
that cannot be read or parsed aborts the whole load, and later sources
are never opened.

Guarantees
----------
* No direct I/O; reading goes through the injected
  :class:`~ason_query.core.protocols.SourceReader`.
* Only :class:`~ason_query.exceptions.AqError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ason_query.ason import AsonValue
from ason_query.core.models import SourceKind, TextSource
from ason_query.core.protocols import DocumentCodec, SourceReader
from ason_query.exceptions import AqError, DocumentParseError, InputReadError

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Turns :class:`TextSource` descriptors into document values.

    Parameters
    ----------
    reader:
        Any object satisfying the :class:`SourceReader` protocol.
    codec:
        Any object satisfying the :class:`DocumentCodec` protocol.
    """

    def __init__(self, reader: SourceReader, codec: DocumentCodec) -> None:
        self._reader: SourceReader = reader
        self._codec: DocumentCodec = codec

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self, sources: Iterable[TextSource]) -> list[AsonValue]:
        """Load every source, returning one value per source in order.

        Raises
        ------
        InputReadError
            When a source cannot be read.
        DocumentParseError
            When a source is not a well-formed document.
        """
        documents: list[AsonValue] = []
        for source in sources:
            text = self.read(source)
            documents.append(self.parse(source, text))
            logger.debug("Parsed %s (%d characters).", source.label, len(text))
        return documents

    def read(self, source: TextSource) -> str:
        if source.kind is SourceKind.ARGUMENT:
            return source.text or ""
        try:
            if source.kind is SourceKind.FILE and source.path is not None:
                return self._reader.read_file(source.path)
            return self._reader.read_stdin()
        except AqError:
            raise
        except Exception as exc:
            raise InputReadError(
                f"Fail to read the input from {source.label}.",
                detail=str(exc),
            ) from exc

    def parse(self, source: TextSource, text: str) -> AsonValue:
        """Parse *text*, attributing any failure to *source*."""
        try:
            return self._codec.parse(text)
        except DocumentParseError as exc:
            raise DocumentParseError(
                f"Fail to parse the input from {_describe(source)}.",
                detail=exc.detail or str(exc),
            ) from exc


def _describe(source: TextSource) -> str:
    if source.kind is SourceKind.FILE:
        return f'the file "{source.label}"'
    return source.label
