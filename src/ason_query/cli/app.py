"""CLI application entry point for ``aq``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ason_query.exceptions.AqError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, reporting them on STDERR and returning
well-defined exit codes.

Architecture notes
------------------
* No pipeline logic lives here; the work is delegated to
  :class:`~ason_query.core.pipeline.QueryPipeline` with the concrete
  infrastructure adapters injected.
* STDOUT is reserved for the rendered document.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from ason_query.cli import exit_codes
from ason_query.cli.console import console
from ason_query.core.config import Configuration
from ason_query.exceptions import AqError, OutputWriteError, UsageError
from ason_query.version import __version__

_EPILOG = """\
examples:
  read STDIN, write STDOUT:
    echo '{id: 123, name: "John"}' | aq .

  read files; several documents are combined into one tuple:
    aq . first.ason second.ason

  write the result to a file:
    echo '[11, 13, 17, 19]' | aq -o numbers.ason .

notes:
  STDIN is ignored when INPUT_FILES are given.
  INPUT_FILES are ignored when --text is given.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="aq",
        description="Query, combine and reformat ASON documents.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="OUTPUT_FILE",
        type=Path,
        default=None,
        help="Write the result to this file instead of STDOUT.",
    )
    parser.add_argument(
        "-q",
        "--query",
        metavar="QUERY_FILE",
        type=Path,
        default=None,
        help="Read the query from this file.",
    )
    parser.add_argument(
        "-t",
        "--text",
        metavar="INPUT_TEXT",
        default=None,
        help="Use this text as the input document.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline steps on STDERR.",
    )
    parser.add_argument(
        "query_expression",
        metavar="QUERY_EXPRESSION",
        nargs="?",
        default=None,
        help="The query string.",
    )
    parser.add_argument(
        "input_files",
        metavar="INPUT_FILES",
        nargs="*",
        type=Path,
        help="Input documents. STDIN is read when none are given.",
    )
    return parser


def _to_configuration(args: argparse.Namespace) -> Configuration:
    return Configuration(
        output=args.output,
        query_file=args.query,
        query_expression=args.query_expression,
        input_files=tuple(args.input_files),
        input_text=args.text,
        verbose=args.verbose,
    )


def parse_configuration(argv: list[str] | None = None) -> Configuration:
    """Parse *argv* into a :class:`Configuration`.

    Options may appear before, between or after the positionals.
    Malformed arguments, ``--help`` and ``--version`` are handled by
    argparse, which exits the process itself.
    """
    return _to_configuration(_build_parser().parse_intermixed_args(argv))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the ``aq`` pipeline.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin, stdout:
        Streams replacing :data:`sys.stdin` / :data:`sys.stdout`.
        Accepting them enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    AqError
        Any pipeline failure; reported by :func:`cli`.
    """
    from ason_query.core.pipeline import QueryPipeline
    from ason_query.infra.ason_codec import AsonCodec
    from ason_query.infra.filesystem import StandardStreams
    from ason_query.logging_setup import configure_logging

    config = parse_configuration(argv)
    configure_logging(config.verbose)

    streams = StandardStreams(stdin=stdin, stdout=stdout)
    QueryPipeline(AsonCodec(), streams, streams).run(config)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Error reporting
# ---------------------------------------------------------------------------

def report_error(exc: AqError) -> None:
    """Write the diagnostic for *exc* on STDERR.

    A usage error prints the usage line and a hint.  Every other error
    prints a context line, then the underlying error on the next line.
    """
    if isinstance(exc, UsageError):
        console.print(str(exc))
        console.print()
        if exc.hint:
            console.print(exc.hint)
        return

    console.print(f"Error: {exc}", style="bold red")
    if exc.detail:
        console.print(exc.detail)
    if exc.hint:
        console.print(f"Hint: {exc.hint}", style="yellow")


def _discard_stdout() -> None:
    """Point STDOUT at the null device after the reader went away.

    Without this the interpreter fails again while flushing STDOUT at
    shutdown.
    """
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        pass


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except AqError as exc:
        report_error(exc)
        if isinstance(exc, OutputWriteError) and isinstance(exc.__cause__, BrokenPipeError):
            _discard_stdout()
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print()
        console.print("Aborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.",
            style="bold red",
        )
        console.print(f"  {type(exc).__name__}: {exc}")
        sys.exit(exit_codes.GENERAL_ERROR)
