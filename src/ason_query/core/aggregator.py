"""Document aggregation — many parsed documents become one root."""

from __future__ import annotations

from collections.abc import Sequence

from ason_query.ason import AsonValue, TupleValue
from ason_query.exceptions import AggregationError


def aggregate(documents: Sequence[AsonValue]) -> AsonValue:
    """Reduce *documents* to a single root document.

    A single document is returned unchanged.  Several documents are
    wrapped, in order, in a :class:`TupleValue`.

    Raises
    ------
    AggregationError
        When *documents* is empty.  Source selection always yields at
        least one source, so this indicates a bug.
    """
    if not documents:
        raise AggregationError("No document was loaded; nothing to output.")
    if len(documents) == 1:
        return documents[0]
    return TupleValue(tuple(documents))
