"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and error
reporting remain functional even when Rich is not installed.

Everything printed here goes to STDERR.
"""

from __future__ import annotations

import sys
from typing import Any

from ason_query.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-stderr fallback.

	Text is never interpreted as markup: paths and parse excerpts are
	user data and may contain square brackets.
	"""

	def print(self, text: str = "", *, style: str | None = None) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(text, file=sys.stderr)
			return
		rich_console.print(
			text,
			style=style,
			markup=False,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
