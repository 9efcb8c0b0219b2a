"""Core / service layer — pure pipeline logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or stream I/O — all of it goes through protocols.
* No imports from ``cli`` or ``infra``.
"""

from ason_query.core.aggregator import aggregate
from ason_query.core.config import Configuration
from ason_query.core.loader import DocumentLoader
from ason_query.core.models import SourceKind, TextSource
from ason_query.core.pipeline import QueryPipeline
from ason_query.core.protocols import DocumentCodec, OutputSink, SourceReader
from ason_query.core.sources import select_sources
from ason_query.core.writer import OutputWriter

__all__: list[str] = [
    "Configuration",
    "DocumentCodec",
    "DocumentLoader",
    "OutputSink",
    "OutputWriter",
    "QueryPipeline",
    "SourceKind",
    "SourceReader",
    "TextSource",
    "aggregate",
    "select_sources",
]
