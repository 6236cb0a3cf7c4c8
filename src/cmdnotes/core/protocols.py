"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so the repository works against any transactional
key-value backend and any record encoding.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager
from typing import Protocol

from cmdnotes.core.models import Command


class RecordCodec(Protocol):
    """Contract for converting a :class:`Command` to and from bytes."""

    def encode(self, record: Command) -> bytes:
        """Serialize *record* into its stored byte representation."""
        ...  # pragma: no cover

    def decode(self, data: bytes) -> Command:
        """Deserialize a stored value back into a :class:`Command`.

        Raises
        ------
        MalformedRecordError
            When *data* cannot be split into a complete record.
        """
        ...  # pragma: no cover


class Bucket(Protocol):
    """A named keyspace inside a transaction."""

    def next_sequence(self) -> int:
        """Advance and return the bucket's persistent sequence."""
        ...  # pragma: no cover

    def put(self, key: bytes, value: bytes) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...  # pragma: no cover

    def get(self, key: bytes) -> bytes | None:
        """Return the value stored under *key*, or ``None``."""
        ...  # pragma: no cover

    def items(self) -> Iterator[tuple[bytes, bytes]]:
        """Yield ``(key, value)`` pairs in ascending key byte order."""
        ...  # pragma: no cover


class Transaction(Protocol):
    """An open transaction against the store."""

    writable: bool

    def bucket(self, name: str) -> Bucket | None:
        """Return the bucket called *name*, or ``None`` if it is missing."""
        ...  # pragma: no cover

    def create_bucket_if_not_exists(self, name: str) -> Bucket:
        """Return the bucket called *name*, creating it when needed."""
        ...  # pragma: no cover


class KeyValueStore(Protocol):
    """Contract for the embedded transactional store.

    Implementations must map all backend-specific exceptions to
    :class:`~cmdnotes.exceptions.CmdNotesError` subclasses.
    """

    def update(self) -> AbstractContextManager[Transaction]:
        """Open a read-write transaction (commit on success, else rollback)."""
        ...  # pragma: no cover

    def view(self) -> AbstractContextManager[Transaction]:
        """Open a read-only transaction (never commits)."""
        ...  # pragma: no cover
