"""Interactive menu loop — add, list, extract, exit.

This module is responsible for:

* Displaying the numbered menu and dispatching on the user's choice.
* Collecting field values through a :class:`~cmdnotes.cli.prompts.Prompter`.
* Rendering records as a Rich table or writing them to an export file.

Recoverable failures (:class:`~cmdnotes.exceptions.CmdNotesError`) are
logged and control returns to the menu.  A cancelled prompt raises
``KeyboardInterrupt`` for the CLI error boundary to handle.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import structlog

from cmdnotes.cli.prompts import Prompter
from cmdnotes.core.formatting import TABLE_HEADERS, format_export_line, table_row
from cmdnotes.core.models import Command
from cmdnotes.core.repository import CommandRepository
from cmdnotes.exceptions import CmdNotesError, EnvironmentError
from cmdnotes.infra.export import write_export

logger = structlog.get_logger(__name__)

MENU: tuple[str, ...] = (
    "Choose an option:",
    "1. Add a command",
    "2. List all commands",
    "3. Extract commands to file",
    "4. Exit",
)


def _escape(value: str) -> str:
    """Escape Rich markup in user-supplied text."""
    from rich.markup import escape

    return escape(value)


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for list rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def _local_now() -> datetime:
    return datetime.now().astimezone()


class Shell:
    """Blocking read-eval-print loop over a :class:`CommandRepository`.

    Parameters
    ----------
    repository:
        Where records are added and listed.
    prompter:
        Source of user input.
    console:
        Rich console receiving all output.
    clock:
        Returns the timestamp stamped on new records.
    """

    def __init__(
        self,
        repository: CommandRepository,
        prompter: Prompter,
        console: Any,
        *,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self._repository = repository
        self._prompter = prompter
        self._console = console
        self._clock = clock
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_command,
            "2": self.list_commands,
            "3": self.extract_commands,
        }

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Loop until the user chooses Exit."""
        while True:
            for line in MENU:
                self._console.print(line)

            choice = self._read("Enter your choice:")
            if choice == "4":
                self._console.print("Exiting...")
                return

            action = self._actions.get(choice)
            if action is None:
                self._console.print("Invalid choice. Please enter a valid option.")
                continue
            action()

    def _read(self, message: str) -> str:
        answer = self._prompter.ask(message)
        if answer is None:
            raise KeyboardInterrupt
        return answer.strip()

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def add_command(self) -> None:
        technology = self._read("Enter the technology:")
        command = self._read("Enter the command:")
        reason = self._read("Enter the reason:")

        try:
            self._repository.add(technology, command, reason, self._clock())
        except CmdNotesError as exc:
            logger.error("Error adding command", error=str(exc))
            return

        self._console.print("Command added successfully.")

    def list_commands(self) -> None:
        try:
            commands = self._repository.list_all()
        except CmdNotesError as exc:
            logger.error("Error listing commands", error=str(exc))
            return

        if not commands:
            self._console.print("No commands found.")
            return

        self._console.print("Commands:")
        self._console.print(self._build_table(commands))

    def extract_commands(self) -> None:
        raw_path = self._read(
            "Enter the file path to save the commands (e.g., commands.txt):",
        )
        path = Path(raw_path)

        try:
            commands = self._repository.list_all()
        except CmdNotesError as exc:
            logger.error("Error getting commands", error=str(exc))
            return

        try:
            write_export(path, (format_export_line(cmd) for cmd in commands))
        except CmdNotesError as exc:
            logger.error("Error writing commands", error=str(exc), path=raw_path)
            return

        self._console.print(f"Commands extracted to {_escape(raw_path)} successfully.")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @staticmethod
    def _build_table(commands: list[Command]) -> Any:
        table_class = _import_rich_table()
        table = table_class(
            show_header=True,
            header_style="bold magenta",
            border_style="dim",
        )
        for header in TABLE_HEADERS:
            table.add_column(header, justify="right" if header == "ID" else "left")

        for cmd in commands:
            table.add_row(*(_escape(cell) for cell in table_row(cmd)))
        return table
