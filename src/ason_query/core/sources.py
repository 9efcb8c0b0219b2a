"""Input source selection.

Decides, from the configuration alone, which raw-text sources feed the
pipeline.  Nothing is read here; the only environment probe is the
terminal check on STDIN, and it is made only when STDIN is the source.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ason_query.core.config import Configuration
from ason_query.core.models import TextSource
from ason_query.exceptions import UsageError

logger = logging.getLogger(__name__)

USAGE_LINE = "Usage: aq [OPTIONS] [QUERY_EXPRESSION] [INPUT_FILES]..."
HELP_HINT = "For more information, try '--help'."


def select_sources(
    config: Configuration,
    *,
    stdin_is_terminal: Callable[[], bool],
) -> list[TextSource]:
    """Return the ordered list of sources to load.

    Precedence
    ----------
    1. ``--text``: the inline text is the only source.
    2. Input files: exactly those paths, in the order given.
    3. STDIN, unless it is an interactive terminal and no query
       expression was given, in which case the invocation is a usage
       error (otherwise the read would block with no prompt).

    When STDIN is a terminal *and* a query expression is present, STDIN
    is still selected and the read waits for end-of-input.

    Raises
    ------
    UsageError
        On an interactive invocation without a query expression.
    """
    if config.input_text is not None:
        logger.debug("Reading the document from the --text argument.")
        return [TextSource.from_text(config.input_text)]

    if config.input_files:
        logger.debug(
            "Reading %d input file(s): %s",
            len(config.input_files),
            ", ".join(str(p) for p in config.input_files),
        )
        return [TextSource.from_file(path) for path in config.input_files]

    if stdin_is_terminal():
        if not config.has_query:
            raise UsageError(USAGE_LINE, hint=HELP_HINT)
        logger.debug("STDIN is a terminal; reading until end-of-input.")
    else:
        logger.debug("Reading the document from STDIN.")
    return [TextSource.from_stdin()]
