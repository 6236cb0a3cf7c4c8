"""Infrastructure layer — SQLite record store and the export file writer.

Every raw third-party exception is caught here and re-raised as a
:class:`~cmdnotes.exceptions.CmdNotesError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cmdnotes.infra.export import write_export
from cmdnotes.infra.store import (
    RecordStore,
    StoreBucket,
    StoreTransaction,
    create_store_engine,
    ensure_bucket,
)

__all__: list[str] = [
    "RecordStore",
    "StoreBucket",
    "StoreTransaction",
    "create_store_engine",
    "ensure_bucket",
    "write_export",
]
