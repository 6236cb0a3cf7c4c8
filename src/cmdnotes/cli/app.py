"""CLI application entry point for cmd-notes.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cmdnotes.exceptions.CmdNotesError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here.  The shell, repository, and store do the
  work and this module wires them together.
* The store handle is opened once, passed explicitly to the repository,
  and closed when the shell returns or raises.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from cmdnotes.cli import exit_codes
from cmdnotes.cli.console import get_rich_console
from cmdnotes.config.logging import configure_logging
from cmdnotes.config.settings import DEFAULT_DB_PATH, Settings
from cmdnotes.exceptions import CmdNotesError
from cmdnotes.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    With no arguments the interactive shell runs against
    ``./commands.db``.
    """
    parser = argparse.ArgumentParser(
        prog="cmd-notes",
        description="Keep a personal log of useful shell commands.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--db",
        default=None,
        metavar="PATH",
        help=f"Store file to use (default: ./{DEFAULT_DB_PATH}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Shell dispatch
# ---------------------------------------------------------------------------

def _run_shell(settings: Settings) -> int:
    """Open the store, ensure the collection exists, and run the menu loop."""
    from cmdnotes.cli.prompts import QuestionaryPrompter
    from cmdnotes.cli.shell import Shell
    from cmdnotes.core.repository import CommandRepository
    from cmdnotes.infra.store import RecordStore, ensure_bucket

    with RecordStore.open(settings.db_path) as store:
        ensure_bucket(store, settings.bucket)
        repository = CommandRepository(store, bucket=settings.bucket)
        shell = Shell(repository, QuestionaryPrompter(), get_rich_console())
        shell.run()

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cmd-notes CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_args(args)
    configure_logging(verbose=settings.verbose)

    return _run_shell(settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CmdNotesError as exc:
        from rich.markup import escape

        console = get_rich_console(stderr=True)
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        get_rich_console(stderr=True).print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        get_rich_console(stderr=True).print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
