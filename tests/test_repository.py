"""Tests for the command repository (core/repository.py).

Runs against a real store under ``tmp_path``; storage failures are
injected at the infra boundary with ``unittest.mock.patch``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from cmdnotes.core.codec import itob
from cmdnotes.core.models import ZERO_TIME, Command
from cmdnotes.core.repository import CommandRepository
from cmdnotes.exceptions import MalformedRecordError, StorageError
from cmdnotes.infra.store import RecordStore, StoreBucket

T1 = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
T2 = datetime(2024, 1, 2, 3, 5, 0, tzinfo=timezone.utc)


def _put_raw(store: RecordStore, key: int, value: bytes) -> None:
    with store.update() as tx:
        tx.create_bucket_if_not_exists("commands").put(itob(key), value)


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_first_id_is_one(self, repository: CommandRepository) -> None:
        assert repository.add("Linux", "ls -la", "list files", T1) == 1

    def test_ids_increase_by_one(self, repository: CommandRepository) -> None:
        ids = [repository.add("t", f"cmd {n}", "r", T1) for n in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_write_failure_raises_storage_error_and_keeps_state(
        self, repository: CommandRepository,
    ) -> None:
        repository.add("Linux", "ls", "first", T1)

        failure = OperationalError("INSERT", {}, Exception("disk I/O error"))
        with patch.object(StoreBucket, "put", side_effect=failure):
            with pytest.raises(StorageError, match="Write transaction failed"):
                repository.add("Git", "git status", "second", T2)

        assert [c.command for c in repository.list_all()] == ["ls"]
        assert repository.add("Git", "git status", "second", T2) == 2

    def test_missing_collection_raises(self, db_path: Path) -> None:
        with RecordStore.open(db_path) as store:
            repo = CommandRepository(store)
            with pytest.raises(StorageError, match="does not exist"):
                repo.add("Linux", "ls", "r", T1)


# ---------------------------------------------------------------------------
# list_all
# ---------------------------------------------------------------------------

class TestListAll:
    def test_empty_store_returns_empty_list(self, repository: CommandRepository) -> None:
        assert repository.list_all() == []

    def test_missing_collection_lists_empty(self, db_path: Path) -> None:
        with RecordStore.open(db_path) as store:
            assert CommandRepository(store).list_all() == []

    def test_linux_then_git_scenario(self, repository: CommandRepository) -> None:
        repository.add("Linux", "ls -la", "list files with details", T1)
        repository.add("Git", "git status", "check repo state", T2)

        assert repository.list_all() == [
            Command(1, "Linux", "ls -la", "list files with details", T1),
            Command(2, "Git", "git status", "check repo state", T2),
        ]

    def test_order_matches_insertion_past_one_byte(self, repository: CommandRepository) -> None:
        for n in range(260):
            repository.add("t", str(n), "r", T1)

        listed = repository.list_all()
        assert [c.id for c in listed] == list(range(1, 261))
        assert [c.command for c in listed] == [str(n) for n in range(260)]

    def test_tolerates_malformed_fields(
        self, store: RecordStore, repository: CommandRepository,
    ) -> None:
        _put_raw(store, 1, b"x,Linux,ls,why,not-a-date")
        [cmd] = repository.list_all()
        assert cmd.id == 0
        assert cmd.date_added == ZERO_TIME

    def test_short_record_raises(
        self, store: RecordStore, repository: CommandRepository,
    ) -> None:
        _put_raw(store, 1, b"garbage")
        with pytest.raises(MalformedRecordError):
            repository.list_all()

    def test_separate_buckets_do_not_mix(self, store: RecordStore) -> None:
        with store.update() as tx:
            tx.create_bucket_if_not_exists("archive")

        main = CommandRepository(store)
        archive = CommandRepository(store, bucket="archive")
        main.add("Linux", "ls", "r", T1)

        assert archive.list_all() == []
        assert archive.add("Git", "git log", "r", T2) == 1
