"""Command repository — add and list operations over the record store.

The repository depends on a :class:`~cmdnotes.core.protocols.KeyValueStore`
and a :class:`~cmdnotes.core.protocols.RecordCodec` injected at
construction time, keeping the core free of any storage imports.

Guarantees
----------
* One transaction per operation: ``add`` uses a write transaction,
  ``list_all`` uses a read-only one.
* Records are keyed by :func:`~cmdnotes.core.codec.itob` of their ID,
  so key order is ID order.
* Only :class:`~cmdnotes.exceptions.CmdNotesError` subclasses escape.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from cmdnotes.core.codec import CommandCodec, itob
from cmdnotes.core.models import Command
from cmdnotes.core.protocols import Bucket, KeyValueStore, RecordCodec, Transaction
from cmdnotes.exceptions import StorageError

logger = structlog.get_logger(__name__)

DEFAULT_BUCKET: str = "commands"


class CommandRepository:
    """Persistence operations for :class:`Command` records.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`KeyValueStore` protocol.
    codec:
        Record encoding; defaults to the delimited text codec.
    bucket:
        Name of the collection holding the records.
    """

    def __init__(
        self,
        store: KeyValueStore,
        codec: RecordCodec | None = None,
        *,
        bucket: str = DEFAULT_BUCKET,
    ) -> None:
        self._store: KeyValueStore = store
        self._codec: RecordCodec = codec if codec is not None else CommandCodec()
        self._bucket_name: str = bucket

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(
        self,
        technology: str,
        command: str,
        reason: str,
        timestamp: datetime,
    ) -> int:
        """Persist a new record and return its freshly assigned ID.

        Raises
        ------
        StorageError
            If the write transaction cannot commit.
        """
        with self._store.update() as tx:
            bucket = self._require_bucket(tx)
            record = Command(
                id=bucket.next_sequence(),
                technology=technology,
                command=command,
                reason=reason,
                date_added=timestamp,
            )
            bucket.put(itob(record.id), self._codec.encode(record))

        logger.debug("command_added", id=record.id, technology=technology)
        return record.id

    def list_all(self) -> list[Command]:
        """Return every record in ascending ID order.

        An empty collection yields an empty list.

        Raises
        ------
        StorageError
            If the read transaction fails.
        MalformedRecordError
            If a stored value is too short to decode.
        """
        with self._store.view() as tx:
            bucket = tx.bucket(self._bucket_name)
            if bucket is None:
                return []
            return [self._codec.decode(value) for _, value in bucket.items()]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _require_bucket(self, tx: Transaction) -> Bucket:
        bucket = tx.bucket(self._bucket_name)
        if bucket is None:
            raise StorageError(
                f"Collection {self._bucket_name!r} does not exist.",
                hint="The store was not initialised; restart cmd-notes.",
            )
        return bucket
