"""Infrastructure layer — external system integration.

This layer wraps all interaction with the ASON format package, the
filesystem and the standard streams.  Every raw exception must be
caught here and re-raised as an
:class:`~ason_query.exceptions.AqError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from ason_query.infra.ason_codec import AsonCodec
from ason_query.infra.filesystem import StandardStreams

__all__: list[str] = [
    "AsonCodec",
    "StandardStreams",
]
