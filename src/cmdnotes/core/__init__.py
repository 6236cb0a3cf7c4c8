"""Core layer — domain model, record codec, and the command repository.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O and no storage imports — persistence is reached
  only through :mod:`cmdnotes.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from cmdnotes.core.codec import CommandCodec, btoi, decode, encode, itob
from cmdnotes.core.models import ZERO_TIME, Command
from cmdnotes.core.protocols import Bucket, KeyValueStore, RecordCodec, Transaction
from cmdnotes.core.repository import DEFAULT_BUCKET, CommandRepository

__all__: list[str] = [
    "DEFAULT_BUCKET",
    "ZERO_TIME",
    "Bucket",
    "Command",
    "CommandCodec",
    "CommandRepository",
    "KeyValueStore",
    "RecordCodec",
    "Transaction",
    "btoi",
    "decode",
    "encode",
    "itob",
]
