"""Core pipeline — select, load, aggregate, write.

The pipeline depends only on the protocols in
:mod:`ason_query.core.protocols`; the CLI layer injects the concrete
adapters.  Every failure surfaces as an
:class:`~ason_query.exceptions.AqError` subclass and nothing is written
to the output destination unless every source loaded successfully.
"""

from __future__ import annotations

import logging

from ason_query.ason import AsonValue
from ason_query.core.aggregator import aggregate
from ason_query.core.config import Configuration
from ason_query.core.loader import DocumentLoader
from ason_query.core.protocols import DocumentCodec, OutputSink, SourceReader
from ason_query.core.sources import select_sources
from ason_query.core.writer import OutputWriter

logger = logging.getLogger(__name__)


class QueryPipeline:
    """Stateless driver for one ``aq`` invocation.

    Parameters
    ----------
    codec:
        Format backend used for both parsing and rendering.
    reader:
        Supplies input text and the STDIN terminal probe.
    sink:
        Receives the rendered output.
    """

    def __init__(
        self,
        codec: DocumentCodec,
        reader: SourceReader,
        sink: OutputSink,
    ) -> None:
        self._reader: SourceReader = reader
        self._loader = DocumentLoader(reader, codec)
        self._writer = OutputWriter(codec, sink)

    def load_root(self, config: Configuration) -> AsonValue:
        """Select and load every source, then aggregate them into one root."""
        sources = select_sources(config, stdin_is_terminal=self._reader.stdin_is_terminal)
        documents = self._loader.load(sources)
        root = aggregate(documents)
        logger.debug("Aggregated %d document(s).", len(documents))
        return root

    def run(self, config: Configuration) -> None:
        """Execute the whole pipeline for *config*."""
        if config.query_expression is not None or config.query_file is not None:
            logger.debug("Query evaluation is not performed; the document is written unchanged.")
        root = self.load_root(config)
        self._writer.write(root, config.output)
