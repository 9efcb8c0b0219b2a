"""Allow ``python -m ason_query`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m ason_query`` behaves identically to the ``aq``
console script.
"""

from __future__ import annotations

from ason_query.cli.app import cli

if __name__ == "__main__":
    cli()
