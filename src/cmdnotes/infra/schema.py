"""SQLAlchemy Core table definitions backing the key-value store.

``buckets`` holds one row per named collection together with its
sequence counter; ``entries`` holds the key/value pairs.  Keys are
BLOBs, which SQLite compares bytewise, so ordering by key gives the
same order a byte-sorted key-value store would.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    LargeBinary,
    MetaData,
    PrimaryKeyConstraint,
    Table,
    Text,
)

metadata = MetaData()

buckets = Table(
    "buckets",
    metadata,
    Column("name", Text, primary_key=True),
    Column("sequence", Integer, nullable=False, default=0, server_default="0"),
)

entries = Table(
    "entries",
    metadata,
    Column("bucket", Text, ForeignKey("buckets.name"), nullable=False),
    Column("key", LargeBinary, nullable=False),
    Column("value", LargeBinary, nullable=False),
    PrimaryKeyConstraint("bucket", "key"),
)
