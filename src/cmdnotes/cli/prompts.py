"""Line-oriented user input for the interactive shell.

The shell only depends on the :class:`Prompter` protocol; the default
implementation asks through questionary.  Tests substitute a scripted
prompter so no terminal is ever needed.
"""

from __future__ import annotations

from typing import Any, Protocol

from cmdnotes.exceptions import EnvironmentError


class Prompter(Protocol):
    """Anything that can ask the user for one line of text."""

    def ask(self, message: str) -> str | None:
        """Return the user's answer, or ``None`` if input was cancelled."""
        ...  # pragma: no cover


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Concrete :class:`Prompter` backed by ``questionary.text``."""

    def ask(self, message: str) -> str | None:
        questionary = _import_questionary()
        try:
            # ``ask`` already returns None on Ctrl+C / Esc.
            return questionary.text(message).ask()
        except EOFError:
            return None
