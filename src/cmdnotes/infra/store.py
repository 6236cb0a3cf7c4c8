"""Embedded transactional key-value store on SQLite via SQLAlchemy Core.

The store exposes named buckets of ``bytes -> bytes`` pairs, each with
its own persistent sequence counter.  It satisfies
:class:`~cmdnotes.core.protocols.KeyValueStore` structurally.

SQLAlchemy Core (not ORM) is used because cmd-notes is a short-lived
CLI process with two tables and no relationships to map.

Rules
-----
* :meth:`RecordStore.update` commits on normal exit and rolls back on
  any exception raised inside the block.
* :meth:`RecordStore.view` never commits; writes through it raise
  :class:`~cmdnotes.exceptions.StorageError`.
* Every SQLAlchemy / sqlite3 error is re-raised as a
  :class:`~cmdnotes.exceptions.CmdNotesError` subclass.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog
from sqlalchemy import create_engine, event, insert, select, text, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from cmdnotes.exceptions import CollectionError, StorageError, StoreOpenError
from cmdnotes.infra.schema import buckets, entries, metadata

logger = structlog.get_logger(__name__)

_DB_ERRORS = (SQLAlchemyError, sqlite3.Error)


def create_store_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


# ---------------------------------------------------------------------------
# Buckets and transactions
# ---------------------------------------------------------------------------

class StoreBucket:
    """A named keyspace bound to one open transaction."""

    def __init__(self, tx: StoreTransaction, name: str) -> None:
        self._tx = tx
        self.name = name

    def next_sequence(self) -> int:
        """Advance the bucket's sequence and return the new value.

        The increment belongs to the surrounding transaction, so a
        rollback also rolls the counter back.
        """
        self._tx.require_writable()
        conn = self._tx.connection
        current: int = conn.execute(
            select(buckets.c.sequence).where(buckets.c.name == self.name)
        ).scalar_one()
        conn.execute(
            update(buckets).where(buckets.c.name == self.name).values(sequence=current + 1)
        )
        return current + 1

    def put(self, key: bytes, value: bytes) -> None:
        self._tx.require_writable()
        stmt = sqlite_insert(entries).values(bucket=self.name, key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[entries.c.bucket, entries.c.key],
            set_={"value": stmt.excluded.value},
        )
        self._tx.connection.execute(stmt)

    def get(self, key: bytes) -> bytes | None:
        return self._tx.connection.execute(
            select(entries.c.value).where(
                entries.c.bucket == self.name,
                entries.c.key == key,
            )
        ).scalar_one_or_none()

    def items(self) -> Iterator[tuple[bytes, bytes]]:
        """Yield ``(key, value)`` pairs in ascending byte order of the key."""
        result = self._tx.connection.execute(
            select(entries.c.key, entries.c.value)
            .where(entries.c.bucket == self.name)
            .order_by(entries.c.key)
        )
        for key, value in result:
            yield bytes(key), bytes(value)


class StoreTransaction:
    """Thin wrapper over a SQLAlchemy connection inside a transaction."""

    def __init__(self, connection: Connection, *, writable: bool) -> None:
        self.connection: Connection = connection
        self.writable: bool = writable

    def require_writable(self) -> None:
        if not self.writable:
            raise StorageError("Cannot write inside a read-only transaction.")

    def bucket(self, name: str) -> StoreBucket | None:
        row = self.connection.execute(
            select(buckets.c.name).where(buckets.c.name == name)
        ).first()
        if row is None:
            return None
        return StoreBucket(self, name)

    def create_bucket_if_not_exists(self, name: str) -> StoreBucket:
        self.require_writable()
        if self.bucket(name) is None:
            self.connection.execute(insert(buckets).values(name=name, sequence=0))
        return StoreBucket(self, name)


# ---------------------------------------------------------------------------
# Store handle
# ---------------------------------------------------------------------------

class RecordStore:
    """File-backed store handle held for the lifetime of the process.

    Usage::

        with RecordStore.open(Path("commands.db")) as store:
            ensure_bucket(store, "commands")
            with store.update() as tx:
                ...
    """

    def __init__(self, engine: Engine, path: Path) -> None:
        self._engine: Engine = engine
        self.path: Path = path

    @classmethod
    def open(cls, path: Path) -> RecordStore:
        """Open (creating if needed) the store file at *path*.

        Raises
        ------
        StoreOpenError
            If the file cannot be opened or is not a valid store.
        """
        engine = create_store_engine(path)
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            metadata.create_all(engine)
        except _DB_ERRORS as exc:
            engine.dispose()
            raise StoreOpenError(
                f"Cannot open store {path}: {exc}",
                hint="Check that the path is writable and is a cmd-notes database.",
            ) from exc

        logger.debug("store_opened", path=str(path))
        return cls(engine, path)

    def close(self) -> None:
        """Release the underlying engine (idempotent)."""
        self._engine.dispose()
        logger.debug("store_closed", path=str(self.path))

    def __enter__(self) -> RecordStore:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    @contextmanager
    def update(self) -> Iterator[StoreTransaction]:
        """Open a read-write transaction."""
        try:
            with self._engine.begin() as conn:
                yield StoreTransaction(conn, writable=True)
        except _DB_ERRORS as exc:
            raise StorageError(f"Write transaction failed: {exc}") from exc

    @contextmanager
    def view(self) -> Iterator[StoreTransaction]:
        """Open a read-only transaction; nothing inside it is committed."""
        try:
            with self._engine.connect() as conn:
                try:
                    yield StoreTransaction(conn, writable=False)
                finally:
                    conn.rollback()
        except _DB_ERRORS as exc:
            raise StorageError(f"Read transaction failed: {exc}") from exc


def ensure_bucket(store: RecordStore, name: str) -> None:
    """Create the bucket called *name* if it does not exist yet.

    Raises
    ------
    CollectionError
        If the bucket cannot be created.
    """
    try:
        with store.update() as tx:
            tx.create_bucket_if_not_exists(name)
    except StorageError as exc:
        raise CollectionError(
            f"Cannot create collection {name!r}: {exc}",
        ) from exc
