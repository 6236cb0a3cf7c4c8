"""Shared pytest fixtures and configuration for the cmd-notes test suite.

Guidelines
----------
* Every store lives under ``tmp_path`` — never the real ``commands.db``.
* No terminal interaction: questionary is replaced by
  :class:`ScriptedPrompter` or patched at ``_import_questionary``.
* Console output is captured with a Rich console writing to a buffer.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from rich.console import Console

from cmdnotes.core.repository import CommandRepository
from cmdnotes.infra.store import RecordStore, ensure_bucket


class ScriptedPrompter:
    """Prompter that replays canned answers, then reports cancellation."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.messages: list[str] = []

    def ask(self, message: str) -> str | None:
        self.messages.append(message)
        if not self._answers:
            return None
        return self._answers.pop(0)


class FixedClock:
    """Clock returning 2024-01-02 03:04:05 UTC, one second later per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self._next = start or datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self._next
        self._next = current + timedelta(seconds=1)
        return current


def console_output(console: Console) -> str:
    """Return everything printed to a console built by :func:`recording_console`."""
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture()
def recording_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "commands.db"


@pytest.fixture()
def store(db_path: Path) -> Iterator[RecordStore]:
    with RecordStore.open(db_path) as opened:
        ensure_bucket(opened, "commands")
        yield opened


@pytest.fixture()
def repository(store: RecordStore) -> CommandRepository:
    return CommandRepository(store)
