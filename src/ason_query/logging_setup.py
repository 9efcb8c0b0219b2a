"""Centralized logging configuration for ason-query.

Log records always go to STDERR so that STDOUT carries nothing but the
rendered document.  Rich is used for the handler when it is installed.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Final

__all__ = ["configure_logging", "resolve_level"]

LOG_LEVEL_ENV: Final[str] = "AQ_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "WARNING"
_MANAGED_ATTR: Final[str] = "_aq_managed"


def resolve_level(verbose: bool = False) -> int:
    """Return the level from ``--verbose`` or the environment variable."""
    if verbose:
        return logging.DEBUG
    level_name = os.getenv(LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME).upper()
    level = getattr(logging, level_name, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def configure_logging(verbose: bool = False) -> None:
    """Install the STDERR handler on the package logger once."""
    logger = logging.getLogger("ason_query")
    managed = [h for h in logger.handlers if getattr(h, _MANAGED_ATTR, False)]
    if not managed:
        handler = _build_handler()
        setattr(handler, _MANAGED_ATTR, True)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(resolve_level(verbose))
