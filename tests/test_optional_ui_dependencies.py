"""Regression tests for the UI dependencies (rich / questionary).

Bootstrap commands must work when the UI packages are missing, and the
interactive paths must fail with a clean :class:`EnvironmentError`
rather than a raw ``ImportError``.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from cmdnotes.cli.app import main
from cmdnotes.cli.console import get_rich_console
from cmdnotes.cli.prompts import QuestionaryPrompter
from cmdnotes.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_console_errors_cleanly_when_rich_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_prompt_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        QuestionaryPrompter().ask("Enter your choice:")


# ---------------------------------------------------------------------------
# QuestionaryPrompter with a mocked questionary
# ---------------------------------------------------------------------------

@patch("cmdnotes.cli.prompts._import_questionary")
def test_prompter_returns_answer(mock_q: MagicMock) -> None:
    mock_q.return_value.text.return_value.ask.return_value = "2"

    assert QuestionaryPrompter().ask("Enter your choice:") == "2"
    mock_q.return_value.text.assert_called_once_with("Enter your choice:")


@patch("cmdnotes.cli.prompts._import_questionary")
def test_prompter_cancel_returns_none(mock_q: MagicMock) -> None:
    mock_q.return_value.text.return_value.ask.return_value = None

    assert QuestionaryPrompter().ask("Enter the command:") is None


@patch("cmdnotes.cli.prompts._import_questionary")
def test_prompter_end_of_input_returns_none(mock_q: MagicMock) -> None:
    mock_q.return_value.text.return_value.ask.side_effect = EOFError

    assert QuestionaryPrompter().ask("Enter the command:") is None
