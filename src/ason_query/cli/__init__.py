"""CLI layer — argument parsing, error reporting, and exit codes.

This package is the outermost layer of the application.  It may import
from ``core`` and ``infra``, but no other layer may import from
``cli``.
"""
